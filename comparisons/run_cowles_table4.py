import sys
import os
import pandas as pd

# Add SIMVA root to path
SIMVA_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), "../"))
if SIMVA_ROOT not in sys.path:
    sys.path.append(SIMVA_ROOT)

from simva.core.engine import sim_anaesthetic_uptake
from simva.core.metrics import mean_relative_difference
from simva.patient.patient import Patient
from comparisons.utils import TABLE4, PINSP, DELTA_TIME, TOTAL_TIME

RESULTS_DIR = os.path.join(os.path.dirname(__file__), "results")

AGENT = "diethyl-ether"


def run_scenario(scenario):
    """Simulate one Table 4 scenario and return its last row."""
    std = Patient()
    patient = Patient(
        cardiac_output=std.cardiac_output * scenario.cardiac_output_factor,
        alveolar_ventilation=std.alveolar_ventilation * scenario.ventilation_factor,
    )
    table = sim_anaesthetic_uptake(
        pinsp=PINSP,
        delta_time=DELTA_TIME,
        total_time=TOTAL_TIME,
        conductances=patient.conductances(AGENT),
        capacitances=patient.capacitances(AGENT),
        tp_factor=patient.tp_factor(),
        **scenario.options,
    )
    return table.last


def run_table4():
    records = []
    for scenario in TABLE4:
        row = run_scenario(scenario)
        keys = list(scenario.published)
        simulated = [getattr(row, k) for k in keys]
        published = [scenario.published[k] for k in keys]
        record = {"Scenario": scenario.name, "Time": row.time}
        for k, sim, pub in zip(keys, simulated, published):
            record[f"{k}_sim"] = sim
            record[f"{k}_pub"] = pub
        record["RelDiff"] = mean_relative_difference(simulated, published)
        records.append(record)
    return pd.DataFrame(records)


def main():
    print("Running Cowles 1973 Table 4 (diethyl ether)...")
    df = run_table4()
    cols = ["Scenario", "palv_sim", "palv_pub", "pvrg_sim", "pvrg_pub", "pcv_sim", "pcv_pub", "RelDiff"]
    print(df[cols].round(3).to_string(index=False))
    os.makedirs(RESULTS_DIR, exist_ok=True)
    output_path = os.path.join(RESULTS_DIR, "simva_table4.csv")
    df.to_csv(output_path, index=False)
    print(f"Saved {output_path}")
    return df


if __name__ == "__main__":
    main()
