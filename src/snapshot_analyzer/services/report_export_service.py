# src/snapshot_analyzer/services/report_export_service.py
import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

import pandas as pd

from snapshot_analyzer.model import AnalysisReport

logger = logging.getLogger(__name__)


def to_json(data: Any, indent: int = 2, ensure_ascii: bool = False) -> str:
    """
    Convert Python object to JSON string.

    Args:
        data: Python object (dict, list, etc.)
        indent: Indentation level for pretty-printing (default: 2)
        ensure_ascii: If True, escape non-ASCII chars (default: False)

    Returns:
        str: JSON string
    """
    return json.dumps(data, ensure_ascii=ensure_ascii, indent=indent)


class ReportExportService:
    """
    Turns an AnalysisReport into outputs for people and downstream tools.

    The report itself stays timestamp-free; `wrap` is the one place a
    generation time is added.
    """

    def __init__(self, report: AnalysisReport):
        self.report = report

    def wrap(
            self,
            source: str,
            extra: Optional[Dict[str, Any]] = None,
            generated_at: Optional[datetime] = None
    ) -> Dict[str, Any]:
        """Outer envelope: source name, generation time and the report body."""
        stamp = generated_at or datetime.now(timezone.utc)
        envelope = {
            "source": source,
            "generatedAt": stamp.isoformat(),
            "report": self.report.to_dict(),
        }
        if extra:
            envelope.update(extra)
        return envelope

    def to_frames(self) -> Dict[str, pd.DataFrame]:
        """
        One DataFrame per tabular section of the report.

        Empty sections still produce a DataFrame with the expected columns so
        that CSV exports keep a stable header.
        """
        data = self.report.to_dict()

        components_df = pd.DataFrame(
            data["components"],
            columns=["name", "tag", "id", "classes", "signature", "childCount",
                     "hasInteractiveElements", "estimatedType"]
        )
        if not components_df.empty:
            components_df["classes"] = components_df["classes"].apply(" ".join)

        layout_rows = [
            {"tag": r["tag"], "id": r["id"], "classes": " ".join(r["classes"]),
             "childCount": r["childCount"], **{f"layout.{k}": v for k, v in r["layout"].items()}}
            for r in data["layouts"]
        ]
        layouts_df = pd.DataFrame(layout_rows) if layout_rows else pd.DataFrame(
            columns=["tag", "id", "classes", "childCount", "layout.type"]
        )

        pattern_rows = [
            {"signature": sig, "count": group["count"],
             "examples": "; ".join(
                 f"{ex['tag']}#{ex['id']}" if ex["id"] else f"{ex['tag']}.{'.'.join(ex['classes'])}"
                 for ex in group["examples"]
             )}
            for sig, group in data["repeatedPatterns"].items()
        ]
        patterns_df = pd.DataFrame(pattern_rows, columns=["signature", "count", "examples"])

        section_rows = [
            {"tag": s["tag"], "id": s["id"], "classes": " ".join(s["classes"]),
             "purpose": s["purpose"], "childCount": s["childCount"],
             "width": s["rect"]["width"], "height": s["rect"]["height"]}
            for s in data["sections"]
        ]
        sections_df = pd.DataFrame(
            section_rows, columns=["tag", "id", "classes", "purpose", "childCount", "width", "height"]
        )

        token_rows = [
            {"category": category, "value": value}
            for category, values in data["designTokens"].items()
            for value in values
        ]
        tokens_df = pd.DataFrame(token_rows, columns=["category", "value"])

        return {
            "components": components_df,
            "layouts": layouts_df,
            "patterns": patterns_df,
            "sections": sections_df,
            "tokens": tokens_df,
        }

    def export_csv(self, out_dir: Path, prefix: str = "") -> Dict[str, Path]:
        """Writes every frame from `to_frames` as `<prefix><name>.csv` into `out_dir`."""
        out_dir = Path(out_dir)
        out_dir.mkdir(parents=True, exist_ok=True)

        written = {}
        for name, df in self.to_frames().items():
            path = out_dir / f"{prefix}{name}.csv"
            df.to_csv(path, index=False)
            written[name] = path

        logger.info("Exported %d CSV files to %s", len(written), out_dir)
        return written
