import argparse
import json
import sys
import time

from simva.core.engine import iter_anaesthetic_uptake
from simva.core.enums import Anaesthetic
from simva.core.errors import SimvaError
from simva.core.recorder import DataRecorder, UptakeTable
from simva.core.units import PRESSURE_UNITS, convert_pressure, kelvin_to_celsius
from simva.patient.patient import Patient

# JSON config keys that map onto Patient fields.
PATIENT_KEYS = (
    "cardiac_output", "alveolar_ventilation", "tissue_temperature",
    "prop_lung", "prop_vrg", "prop_mus", "prop_fat",
    "lung_air_volume", "lung_tissue_volume", "vrg_volume", "mus_volume", "fat_volume",
    "lung_blood_volume", "vrg_blood_volume", "mus_blood_volume", "fat_blood_volume",
)

# JSON config keys that map onto command line options.
SIM_KEYS = (
    "agent", "pinsp", "delta_time", "total_time",
    "humidification", "pambient", "pwater", "pressure_unit",
    "concentration_effect", "shunt_frac", "metabolism_frac",
)


def load_config(path):
    with open(path, 'r') as f:
        config_data = json.load(f)
    if not isinstance(config_data, dict):
        raise ValueError("Config file must contain a JSON object")
    return config_data


def build_patient(args, config_data):
    patient_kwargs = {k: config_data[k] for k in PATIENT_KEYS if k in config_data}
    if args.cardiac_output is not None:
        patient_kwargs["cardiac_output"] = args.cardiac_output
    if args.ventilation is not None:
        patient_kwargs["alveolar_ventilation"] = args.ventilation
    return Patient(**patient_kwargs)


def run_headless(args, explicit=()):
    """
    Run one simulation and print/record the result rows.

    explicit holds the option names given on the command line; those win
    over the config file.
    """
    config_data = {}
    if args.config:
        try:
            config_data = load_config(args.config)
        except (OSError, ValueError) as e:
            print(f"Error loading config: {e}")
            sys.exit(1)
    for key in SIM_KEYS:
        if key in config_data and key not in explicit:
            setattr(args, key, config_data[key])

    try:
        patient = build_patient(args, config_data)
        pambient = convert_pressure(args.pambient, args.pressure_unit, "kpa")
        pwater = convert_pressure(args.pwater, args.pressure_unit, "kpa")
        rows = iter_anaesthetic_uptake(
            pinsp=args.pinsp,
            delta_time=args.delta_time,
            total_time=args.total_time,
            conductances=patient.conductances(args.agent),
            capacitances=patient.capacitances(args.agent),
            use_humidification=args.humidification,
            pambient=pambient,
            pwater=pwater,
            use_concentration_effect=args.concentration_effect,
            tp_factor=patient.tp_factor(),
            shunt_frac=args.shunt_frac,
            metabolism_frac=args.metabolism_frac,
        )
    except (SimvaError, TypeError) as e:
        print(f"Error: {e}")
        sys.exit(1)

    print(
        f"Starting Uptake Simulation ({args.agent}, pinsp {args.pinsp}, "
        f"{args.total_time} min, dt {args.delta_time} min, "
        f"{kelvin_to_celsius(patient.tissue_temperature):.1f} degC)..."
    )

    recorder = None
    if args.output:
        recorder = DataRecorder(args.output, sample_interval_min=args.record_interval)
        recorder.start()

    start_real = time.time()
    kept = []
    try:
        for i, row in enumerate(rows, start=1):
            kept.append(row)
            if recorder:
                recorder.log(row)
            if args.print_every > 0 and i % args.print_every == 0:
                print(
                    f"Time: {row.time:6.2f} min | Palv: {row.palv:.3f} | Part: {row.part:.3f} | "
                    f"Pvrg: {row.pvrg:.3f} | Pmus: {row.pmus:.3f} | Pfat: {row.pfat:.3f} | Pcv: {row.pcv:.3f}"
                )
    finally:
        if recorder:
            recorder.stop()
    end_real = time.time()

    table = UptakeTable.from_rows(kept)
    print(f"Simulation completed: {len(table)} steps in {end_real - start_real:.2f}s real time.")
    if recorder:
        print(f"Saved {recorder.rows_written} rows to {args.output}")
    return table


def build_parser(suppress_defaults=False):
    def default(value):
        return argparse.SUPPRESS if suppress_defaults else value

    parser = argparse.ArgumentParser(description="SIMVA - Volatile Anaesthetic Uptake Simulator")
    parser.add_argument("--agent", choices=Anaesthetic.choices(), default=default("diethyl-ether"), help="Anaesthetic agent")
    parser.add_argument("--pinsp", type=float, default=default(12.0), help="Inspired partial pressure")
    parser.add_argument("--delta-time", type=float, default=default(0.1), help="Time step in minutes")
    parser.add_argument("--total-time", type=float, default=default(10.0), help="Simulated time in minutes")
    parser.add_argument("--ventilation", type=float, default=default(None), help="Alveolar minute ventilation in l/min")
    parser.add_argument("--cardiac-output", type=float, default=default(None), help="Total cardiac output in l/min")
    parser.add_argument("--humidification", action="store_true", default=default(False), help="Dilute inspired gas by water vapour")
    parser.add_argument("--pambient", type=float, default=default(101.325), help="Ambient pressure")
    parser.add_argument("--pwater", type=float, default=default(6.26), help="Water vapour pressure")
    parser.add_argument("--pressure-unit", choices=PRESSURE_UNITS, default=default("kpa"), help="Unit of --pambient/--pwater")
    parser.add_argument("--concentration-effect", action="store_true", default=default(False), help="Enable the concentration effect")
    parser.add_argument("--shunt-frac", type=float, default=default(0.0), help="Pulmonary shunt fraction (0-1)")
    parser.add_argument("--metabolism-frac", type=float, default=default(0.0), help="Fraction metabolized per hour (0-1)")
    parser.add_argument("--config", type=str, default=default(None), help="Path to JSON configuration file")
    parser.add_argument("--output", type=str, default=default(None), help="CSV file for the result rows")
    parser.add_argument("--record-interval", type=float, default=default(0.0), help="Minimum minutes between recorded rows")
    parser.add_argument("--print-every", type=int, default=default(10), help="Print every n-th row (0 disables)")
    return parser


def explicit_options(argv=None):
    """Names of the options given on the command line."""
    return set(vars(build_parser(suppress_defaults=True).parse_args(argv)))


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    run_headless(args, explicit_options(argv))


if __name__ == "__main__":
    main()
