from enum import Enum


class Compartment(str, Enum):
    """Cargo compartment (CP). Declaration order is the loading order."""

    CP1 = "CP1"
    CP2 = "CP2"
    CP3 = "CP3"
    CP4 = "CP4"
    CP5 = "CP5"


COMPARTMENT_ORDER = list(Compartment)
