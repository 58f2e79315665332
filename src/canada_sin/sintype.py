"""
Enumeration of all the kinds of SIN: the provinces & territories that issue
them, plus some special categories.

The enumeration is not final; more categories may be added in the future
"""

from enum import Enum


class SinType(str, Enum):
    CRA_ASSIGNED = "CRA-assigned"
    TEMPORARY_RESIDENT = "Temporary resident"
    BUSINESS_NUMBER = "Business number"
    OVERSEAS_FORCES = "Overseas forces"
    ALBERTA = "Alberta"
    BRITISH_COLUMBIA = "British Columbia"
    MANITOBA = "Manitoba"
    NEW_BRUNSWICK = "New Brunswick"
    NEWFOUNDLAND_LABRADOR = "Newfoundland and Labrador"
    NORTHWEST_TERRITORIES = "Northwest Territories"
    NOVA_SCOTIA = "Nova Scotia"
    NUNAVUT = "Nunavut"
    ONTARIO = "Ontario"
    PRINCE_EDWARD_ISLAND = "Prince Edward Island"
    QUEBEC = "Quebec"
    SASKATCHEWAN = "Saskatchewan"
    YUKON = "Yukon"

    @property
    def label(self) -> str:
        return self.value

    @property
    def is_province(self) -> bool:
        """
        Does the SIN represent someone in a province or territory?
        """
        return self in _GEOGRAPHIC

    @property
    def is_human(self) -> bool:
        """
        Does the SIN represent a natural person? Only business numbers are
        assigned to non-humans
        """
        return self is not SinType.BUSINESS_NUMBER


_GEOGRAPHIC = frozenset(
    (
        SinType.ALBERTA,
        SinType.BRITISH_COLUMBIA,
        SinType.MANITOBA,
        SinType.NEW_BRUNSWICK,
        SinType.NEWFOUNDLAND_LABRADOR,
        SinType.NORTHWEST_TERRITORIES,
        SinType.NOVA_SCOTIA,
        SinType.NUNAVUT,
        SinType.ONTARIO,
        SinType.PRINCE_EDWARD_ISLAND,
        SinType.QUEBEC,
        SinType.SASKATCHEWAN,
        SinType.YUKON,
    )
)


# Possible types for each leading digit. Order within each entry is significant
# https://en.wikipedia.org/wiki/Social_Insurance_Number#Geography
TYPES_BY_DIGIT = {
    0: (SinType.CRA_ASSIGNED,),
    1: (
        SinType.NOVA_SCOTIA,
        SinType.NEW_BRUNSWICK,
        SinType.PRINCE_EDWARD_ISLAND,
        SinType.NEWFOUNDLAND_LABRADOR,
    ),
    2: (SinType.QUEBEC,),
    3: (SinType.QUEBEC,),
    4: (SinType.ONTARIO, SinType.OVERSEAS_FORCES),
    5: (SinType.ONTARIO, SinType.OVERSEAS_FORCES),
    6: (
        SinType.ONTARIO,
        SinType.MANITOBA,
        SinType.SASKATCHEWAN,
        SinType.ALBERTA,
        SinType.NORTHWEST_TERRITORIES,
        SinType.NUNAVUT,
    ),
    7: (SinType.BRITISH_COLUMBIA, SinType.YUKON, SinType.BUSINESS_NUMBER),
    8: (SinType.BUSINESS_NUMBER,),
    9: (SinType.TEMPORARY_RESIDENT,),
}
