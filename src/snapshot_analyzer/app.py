# src/snapshot_analyzer/app.py
import argparse
import json
import logging
from pathlib import Path
from typing import List, Optional

from tqdm import tqdm

from snapshot_analyzer.controllers.analysis_controller import AnalysisController
from snapshot_analyzer.core.managers.config_manager import config_manager
from snapshot_analyzer.core.utils.configure_logging import configure_logger
from snapshot_analyzer.dom.builder import SnapshotBuilder, SnapshotError
from snapshot_analyzer.dom.core import SnapshotNode
from snapshot_analyzer.services.report_export_service import ReportExportService, to_json

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="snapshot-analyzer",
        description="Derive components, layouts, design tokens and repeated patterns from page snapshots."
    )
    parser.add_argument("--log-level", default=None, help="Overrides debug.level from settings.json.")
    sub = parser.add_subparsers(dest="subcommand")

    p_analyze = sub.add_parser("analyze", help="Analyze one or more snapshot files.")
    p_analyze.add_argument("inputs", nargs="+", type=Path, help="Snapshot JSON files (or HTML with --html).")
    p_analyze.add_argument("--html", action="store_true", help="Treat inputs as static HTML.")
    p_analyze.add_argument("-o", "--output", type=Path, default=None,
                           help="Write JSON here (a directory when several inputs are given). Default: stdout.")
    p_analyze.add_argument("--csv-dir", type=Path, default=None, help="Also export report tables as CSV.")
    p_analyze.add_argument("--component-map", action="store_true", help="Include the component map.")
    p_analyze.add_argument("--styling-config", action="store_true", help="Include the styling config.")
    return parser


def load_snapshot(path: Path, as_html: bool, builder: SnapshotBuilder) -> Optional[SnapshotNode]:
    """Reads one input file into a snapshot tree."""
    text = path.read_text(encoding="utf-8")
    if as_html:
        return builder.from_html(text)
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise SnapshotError(f"{path.name} is not valid JSON: {e}") from e
    # The capture step may wrap the tree: {"dom": {...}, ...}
    if isinstance(data, dict) and "tag" not in data and isinstance(data.get("dom"), dict):
        data = data["dom"]
    return builder.from_dict(data)


def run_analyze(pargs: argparse.Namespace) -> int:
    controller = AnalysisController()
    builder = SnapshotBuilder(
        max_depth=controller.settings.max_depth,
        max_children=config_manager.get_nested("builder.max_children", 50),
    )

    inputs: List[Path] = pargs.inputs
    multiple = len(inputs) > 1
    if multiple and pargs.output:
        pargs.output.mkdir(parents=True, exist_ok=True)

    failures = 0
    for path in tqdm(inputs, desc="Analyzing", unit="file", disable=not multiple):
        try:
            root = load_snapshot(path, pargs.html, builder)
        except (OSError, SnapshotError) as e:
            logger.error("Skipping %s: %s", path, e)
            failures += 1
            continue

        artifacts = controller.generate_artifacts(root)
        report = artifacts["report"]
        exporter = ReportExportService(report)

        extra = {}
        if pargs.component_map:
            extra["componentMap"] = artifacts["componentMap"]
        if pargs.styling_config:
            extra["stylingConfig"] = artifacts["stylingConfig"]
        payload = to_json(exporter.wrap(path.name, extra=extra))

        if pargs.output is None:
            print(payload)
        else:
            target = pargs.output / f"{path.stem}.analysis.json" if multiple else pargs.output
            target.write_text(payload, encoding="utf-8")
            logger.info("Report written to %s", target)

        if pargs.csv_dir:
            exporter.export_csv(pargs.csv_dir, prefix=f"{path.stem}_")

    return 1 if failures else 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    try:
        pargs = parser.parse_args(argv)
    except SystemExit as e:
        return int(e.code or 0)

    configure_logger(
        pargs.log_level or config_manager.get_nested("debug.level", "WARNING"),
        module_specific_levels=config_manager.get_nested("debug.module_levels", {}),
        silenced_loggers=config_manager.get_nested("debug.silenced", {}),
    )

    if pargs.subcommand == "analyze":
        return run_analyze(pargs)

    parser.print_help()
    return 1
