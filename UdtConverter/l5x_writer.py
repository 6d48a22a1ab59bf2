# l5x_writer.py
# Copyright (c) 2025 Alex Prochot
#
# Builds the Studio 5000 L5X document for parsed UDTs.
"""Render parsed UDTs as an RSLogix5000Content DataType export (L5X)."""

from __future__ import annotations
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, Iterable, Optional

from lxml import etree

from . import models
from .data_types import BIT, radix_for
from .errors import EmissionError

__all__ = ["L5XSettings", "EmissionError", "create_l5x", "member_attributes"]

logger = logging.getLogger(__name__)

XML_DECLARATION = b'<?xml version="1.0" ?>\n'
EXPORT_DATE_FORMAT = "%a %b %d %H:%M:%S %Y"
DEFAULT_EXPORT_OPTIONS = (
    "References NoRawData L5KData DecoratedData Context Dependencies "
    "ForceProtectedEncoding AllProjDocTrans"
)
BOOL_ARRAY_WORD_BITS = 32
INDENT = "    "


@dataclass
class L5XSettings:
    """Static values written to the RSLogix5000Content root and Controller elements."""
    controller_name: str = "UdtConverter"
    schema_revision: str = "1.0"
    software_revision: str = "35.0"
    export_options: str = DEFAULT_EXPORT_OPTIONS


def dimension(member: models.UdtMember) -> int:
    """0 for scalars; hi + 1 for arrays, padded to 32 bit words for BOOL arrays."""
    if member.array_bounds is None:
        return 0
    size = member.array_bounds[1] + 1
    if member.is_bool:
        words = -(-size // BOOL_ARRAY_WORD_BITS)
        return words * BOOL_ARRAY_WORD_BITS
    return size


def external_access(member: models.UdtMember) -> str:
    if member.external_write:
        return "Read/Write"
    if member.external_read:
        return "Read Only"
    return "None"


def member_attributes(member: models.UdtMember) -> Dict[str, str]:
    """Attributes of one <Member>, in Studio 5000 order."""
    data_type = BIT if member.is_scalar_bool else member.data_type
    attrs = {
        "Name": member.name,
        "DataType": data_type,
        "Dimension": str(dimension(member)),
        "Radix": radix_for(data_type),
        "Hidden": "true" if member.hidden else "false",
        "ExternalAccess": external_access(member),
    }
    if member.is_scalar_bool:
        attrs["Target"] = member.target or ""
        attrs["BitNumber"] = str(member.bit_num)
    return attrs


def _add_description(parent: etree._Element, description: Optional[str]) -> None:
    if description:
        etree.SubElement(parent, "Description").text = etree.CDATA(description)


def _add_members(parent: etree._Element, udt: models.Udt) -> None:
    members_el = etree.SubElement(parent, "Members")
    for member in udt.members:
        member_el = etree.SubElement(members_el, "Member", attrib=member_attributes(member))
        _add_description(member_el, member.description)


def _add_data_type(container: etree._Element, udt: models.Udt, target: bool = False) -> etree._Element:
    attrib = {"Use": "Target"} if target else {}
    attrib.update({"Name": udt.name, "Family": "NoFamily", "Class": "User"})
    dt = etree.SubElement(container, "DataType", attrib=attrib)
    _add_description(dt, udt.description)
    _add_members(dt, udt)
    return dt


def _add_dependencies(parent: etree._Element, udts: Iterable[models.Udt]) -> None:
    deps = etree.SubElement(parent, "Dependencies")
    for udt in udts:
        etree.SubElement(deps, "Dependency", Type="DataType", Name=udt.name)


def build_tree(
    udts: list[models.Udt],
    parent_udt: models.Udt,
    settings: L5XSettings,
    export_date: datetime,
) -> etree._Element:
    """
    RSLogix5000Content
      Controller (Context)
        DataTypes (Context)
          DataType parent (Target) + Dependencies
          DataType per dependency
    """
    root = etree.Element("RSLogix5000Content", attrib={
        "SchemaRevision": settings.schema_revision,
        "SoftwareRevision": settings.software_revision,
        "TargetName": parent_udt.name,
        "TargetType": "DataType",
        "ContainsContext": "true",
        "ExportDate": export_date.strftime(EXPORT_DATE_FORMAT),
        "ExportOptions": settings.export_options,
    })
    controller = etree.SubElement(root, "Controller", Use="Context", Name=settings.controller_name)
    data_types = etree.SubElement(controller, "DataTypes", Use="Context")

    parent_el = _add_data_type(data_types, parent_udt, target=True)
    _add_dependencies(parent_el, udts)
    for udt in udts:
        _add_data_type(data_types, udt)
    return root


def create_l5x(
    udts: list[models.Udt],
    parent_udt: models.Udt,
    settings: Optional[L5XSettings] = None,
    export_date: Optional[datetime] = None,
) -> bytes:
    """
    Generate the L5X document for parent_udt with udts as its dependencies.
    Returns UTF-8 bytes starting with the XML declaration line.
    Raises EmissionError if lxml rejects a name or description.
    """
    settings = settings or L5XSettings()
    export_date = export_date or datetime.now()
    try:
        root = build_tree(udts, parent_udt, settings, export_date)
        etree.indent(root, space=INDENT)
        body = etree.tostring(root, encoding="UTF-8", xml_declaration=False)
    except (ValueError, TypeError) as e:
        raise EmissionError(f'Failed to write L5X for UDT "{parent_udt.name}": {e}') from e
    logger.debug("Rendered L5X for %s with %d dependencies", parent_udt.name, len(udts))
    return XML_DECLARATION + body + b"\n"
