from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="UdtConverter",
    version="0.1.0",
    author="Alex Prochot",
    description="CLI tool converting TIA Portal UDT exports to Studio 5000 L5X DataType files",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/prochot/UdtConverter",
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.12",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Intended Audience :: Developers",
    ],
    python_requires=">=3.11",
    install_requires=[
        "lxml>=4.5",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "udt-converter=UdtConverter.main:main",
        ],
    },
)
