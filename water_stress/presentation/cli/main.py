"""CLI interface for the water stress monitor."""

import argparse
import logging
import sys
import threading

from ...application.bootstrap import build_monitoring_service
from ...application.services.refresh_scheduler import PeriodicRefresher
from ...domain.use_cases.compute_water_stress import compute_stress

from config.settings import LOG_SETTINGS, MONITOR_SETTINGS, MONITORED_LOCATIONS, REFERENCE_LOCATIONS, USGS_STATIONS

logger = logging.getLogger(__name__)


def _print_table(snapshots) -> None:
    print("\n" + "=" * 78)
    print(f" {'Location':<16}{'Stress':>8}  {'Severity':<10}{'Precip':>10}{'Temp':>8}{'RH':>7}  Source")
    print("-" * 78)
    for s in sorted(snapshots, key=lambda s: s.assessment.index, reverse=True):
        obs = s.observation
        print(
            f" {s.name:<16}{s.assessment.index:>7.1f}%  {s.assessment.severity_level.value:<10}"
            f"{_cell(obs.precipitation_mm_per_day):>10}{_cell(obs.temperature_celsius):>8}"
            f"{_cell(obs.relative_humidity_percent):>7}  {obs.source}"
        )
    print("=" * 78)


def _cell(value) -> str:
    return "N/A" if value is None else f"{value:g}"


def main(argv=None):
    parser = argparse.ArgumentParser(description="Water Stress Monitor")
    parser.add_argument("--log-level", default=LOG_SETTINGS["level"], help="Logging level")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # === score: Compute the index for given readings ===
    score_parser = subparsers.add_parser("score", help="Compute the water stress index for given readings")
    score_parser.add_argument("--precipitation", type=float, required=True, help="mm/day")
    score_parser.add_argument("--temperature", type=float, required=True, help="Celsius")
    score_parser.add_argument("--humidity", type=float, default=0.0, help="Relative humidity %%")
    score_parser.add_argument("--population", type=float, required=True, help="Population in millions")

    # === refresh: Fetch all locations once ===
    refresh_parser = subparsers.add_parser("refresh", help="Fetch and score every monitored location once")
    refresh_parser.add_argument("--export", type=str, default=None, help="Write results to .csv or .xlsx")
    refresh_parser.add_argument(
        "--missing-data",
        choices=["zero", "skip"],
        default=None,
        help="How to treat values a provider did not supply",
    )
    refresh_parser.add_argument("--delay", type=float, default=None, help="Seconds between requests")

    # === monitor: Refresh periodically until interrupted ===
    monitor_parser = subparsers.add_parser("monitor", help="Refresh periodically until interrupted")
    monitor_parser.add_argument(
        "--interval", type=float, default=MONITOR_SETTINGS["update_interval"], help="Seconds between refreshes"
    )
    monitor_parser.add_argument("--iterations", type=int, default=None, help="Stop after N refreshes")
    monitor_parser.add_argument("--export", type=str, default=None, help="Write results to .csv or .xlsx")

    # === water-levels: USGS gauges ===
    levels_parser = subparsers.add_parser("water-levels", help="Show latest USGS river gauge readings")
    levels_parser.add_argument(
        "--station", action="append", choices=sorted(USGS_STATIONS), help="Station key (repeatable)"
    )

    # === reference: NASA POWER soil moisture at reference points ===
    reference_parser = subparsers.add_parser(
        "reference", help="Show latest soil moisture and evapotranspiration at reference points"
    )
    reference_parser.add_argument(
        "--name",
        action="append",
        choices=[loc["name"] for loc in REFERENCE_LOCATIONS],
        help="Reference point name (repeatable)",
    )

    # === locations: List monitored locations ===
    locations_parser = subparsers.add_parser("locations", help="List monitored locations")
    locations_parser.add_argument(
        "--reference", action="store_true", help="List the satellite reference points instead"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format=LOG_SETTINGS["format"],
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    # === Command: score ===
    if args.command == "score":
        assessment = compute_stress(args.precipitation, args.temperature, args.humidity, args.population)
        print(f"Water stress index: {assessment.index:.1f} ({assessment.severity_level.value})")
        print(f"  Aridity:     {assessment.aridity:5.1f} / 40")
        print(f"  Per capita:  {assessment.per_capita:5.1f} / 30")
        print(f"  Temperature: {assessment.temperature:5.1f} / 20")
        print(f"  Humidity:    {assessment.humidity:5.1f} / 10")
        return 0

    # === Command: locations ===
    if args.command == "locations":
        if args.reference:
            for loc in REFERENCE_LOCATIONS:
                print(f"{loc['name']:<20}{loc['latitude']:>10.4f}{loc['longitude']:>11.4f}")
            return 0
        for loc in MONITORED_LOCATIONS:
            print(
                f"{loc['name']:<16}{loc['country']:<4}{loc['latitude']:>10.4f}{loc['longitude']:>11.4f}"
                f"{loc['population_millions']:>7.1f}M"
            )
        return 0

    # === Initialize service ===
    try:
        service = build_monitoring_service(
            missing_data_policy=getattr(args, "missing_data", None),
            export_file=getattr(args, "export", None),
            request_delay=getattr(args, "delay", None),
        )
    except Exception as e:
        logger.error(f"Failed to initialize service: {e}")
        sys.exit(1)

    # === Command: refresh ===
    if args.command == "refresh":
        try:
            report = service.refresh_all()
        except Exception as e:
            logger.error(f"Refresh failed: {e}", exc_info=True)
            sys.exit(1)
        _print_table(service.snapshots())
        summary = service.summary()
        print(f" Monitored: {summary['total_monitored']} | Critical zones: {summary['critical_zones']}")
        if report.unavailable:
            print(f" Unavailable: {', '.join(report.unavailable)}")
        if report.skipped:
            print(f" Skipped (incomplete data): {', '.join(report.skipped)}")
        return 0

    # === Command: monitor ===
    if args.command == "monitor":
        done = threading.Event()
        runs = {"count": 0}

        def task():
            service.refresh_all()
            _print_table(service.snapshots())
            runs["count"] += 1
            if args.iterations and runs["count"] >= args.iterations:
                done.set()

        refresher = PeriodicRefresher(task, interval_seconds=args.interval)
        refresher.start()
        try:
            while not done.wait(timeout=1):
                pass
        except KeyboardInterrupt:
            print("\nStopping monitor...")
        finally:
            refresher.stop()
        return 0

    # === Command: water-levels ===
    if args.command == "water-levels":
        try:
            readings = service.water_levels(args.station)
        except Exception as e:
            logger.error(f"Water level lookup failed: {e}", exc_info=True)
            sys.exit(1)
        if not readings:
            print("No water level readings available.")
        for r in readings:
            print(f" {r.site_name} [{r.parameter_code}]: {r.value} {r.unit} at {r.timestamp}")
        return 0

    # === Command: reference ===
    if args.command == "reference":
        try:
            readings = service.reference_readings(args.name)
        except Exception as e:
            logger.error(f"Satellite lookup failed: {e}", exc_info=True)
            sys.exit(1)
        if not readings:
            print("No satellite readings available.")
        for r in readings:
            print(
                f" {r.location_name:<20}{r.date:>10}  precip {_cell(r.precipitation_mm_per_day):>6} mm"
                f"  soil moisture {_cell(r.root_zone_moisture_percent):>5}%"
                f"  ET {_cell(r.evapotranspiration_mm_per_day):>5} mm"
            )
        return 0

    return 0


if __name__ == "__main__":
    sys.exit(main())
