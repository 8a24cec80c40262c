from dataclasses import dataclass, field
from typing import Union

from simva.core.constants import (
    ALVEOLAR_VENTILATION_L_MIN,
    BLOOD_VOLUMES_L,
    CARDIAC_OUTPUT_L_MIN,
    CARDIAC_OUTPUT_PROPORTIONS,
    TISSUE_TEMPERATURE_K,
    TISSUE_VOLUMES_L,
)
from simva.core.enums import Anaesthetic
from simva.core.state import CompartmentValues
from simva.physiology.params import (
    capacitance,
    cardiac_output,
    conductance,
    lung_capacitance,
    partition_coefficients,
    stp_factor,
)


@dataclass
class Patient:
    """
    Baseline physiology of the Cowles "standard man" (Table 3).
    """
    cardiac_output: float = CARDIAC_OUTPUT_L_MIN              # l/min
    alveolar_ventilation: float = ALVEOLAR_VENTILATION_L_MIN  # l/min
    tissue_temperature: float = TISSUE_TEMPERATURE_K          # K

    # Fraction of cardiac output
    prop_lung: float = CARDIAC_OUTPUT_PROPORTIONS["lung"]
    prop_vrg: float = CARDIAC_OUTPUT_PROPORTIONS["vrg"]
    prop_mus: float = CARDIAC_OUTPUT_PROPORTIONS["mus"]
    prop_fat: float = CARDIAC_OUTPUT_PROPORTIONS["fat"]

    # Tissue volumes (l)
    lung_air_volume: float = TISSUE_VOLUMES_L["lung_air"]
    lung_tissue_volume: float = TISSUE_VOLUMES_L["lung_tissue"]
    vrg_volume: float = TISSUE_VOLUMES_L["vrg"]
    mus_volume: float = TISSUE_VOLUMES_L["mus"]
    fat_volume: float = TISSUE_VOLUMES_L["fat"]

    # Blood volumes (l)
    lung_blood_volume: float = BLOOD_VOLUMES_L["lung"]
    vrg_blood_volume: float = BLOOD_VOLUMES_L["vrg"]
    mus_blood_volume: float = BLOOD_VOLUMES_L["mus"]
    fat_blood_volume: float = BLOOD_VOLUMES_L["fat"]

    # Derived
    blood_flow: CompartmentValues = field(init=False)

    def __post_init__(self):
        self.blood_flow = cardiac_output(
            total=self.cardiac_output,
            prop_lung=self.prop_lung,
            prop_vrg=self.prop_vrg,
            prop_mus=self.prop_mus,
            prop_fat=self.prop_fat,
        )

    def tp_factor(self) -> float:
        return stp_factor(tissue_temperature=self.tissue_temperature)

    def conductances(self, agent: Union[str, Anaesthetic]) -> CompartmentValues:
        """
        Ventilation conductance for the lung (gas:gas coefficient 1.0) and
        perfusion conductances (blood:gas coefficient) for the tissues.
        """
        coefs = partition_coefficients(agent)
        tp = self.tp_factor()
        flow = self.blood_flow
        return CompartmentValues(
            lung=conductance(self.alveolar_ventilation, 1.0, tp),
            vrg=conductance(flow.vrg, coefs.lung, tp),
            mus=conductance(flow.mus, coefs.lung, tp),
            fat=conductance(flow.fat, coefs.lung, tp),
        )

    def capacitances(self, agent: Union[str, Anaesthetic]) -> CompartmentValues:
        """Tissue plus blood capacitances; the lung adds its alveolar air."""
        coefs = partition_coefficients(agent)
        tp = self.tp_factor()
        # Lung tissue uses the blood:gas coefficient.
        return CompartmentValues(
            lung=lung_capacitance(
                self.lung_air_volume,
                self.lung_tissue_volume, coefs.lung,
                self.lung_blood_volume, coefs.lung,
                tp,
            ),
            vrg=capacitance(self.vrg_volume, coefs.vrg, self.vrg_blood_volume, coefs.lung, tp),
            mus=capacitance(self.mus_volume, coefs.mus, self.mus_blood_volume, coefs.lung, tp),
            fat=capacitance(self.fat_volume, coefs.fat, self.fat_blood_volume, coefs.lung, tp),
        )
