from enum import Enum, IntEnum


class Compartment(IntEnum):
    """Lumped physiological compartments, in model order."""
    LUNG = 0
    VRG = 1   # Vessel-rich group (brain, heart, kidney)
    MUS = 2   # Muscle, lean tissue
    FAT = 3

    @property
    def key(self) -> str:
        return self.name.lower()


class Anaesthetic(Enum):
    """Volatile agents with tabulated partition coefficients (Cowles Table 2)."""
    NITROUS_OXIDE = "nitrous-oxide"
    DIETHYL_ETHER = "diethyl-ether"
    HALOTHANE = "halothane"

    @classmethod
    def choices(cls):
        return [member.value for member in cls]
