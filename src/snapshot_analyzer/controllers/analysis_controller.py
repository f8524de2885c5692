# src/snapshot_analyzer/controllers/analysis_controller.py
import logging
from typing import Any, Dict, List, Optional

from snapshot_analyzer.classifiers.component_classifier import analyze_components
from snapshot_analyzer.classifiers.layout_classifier import analyze_layouts
from snapshot_analyzer.classifiers.section_classifier import scan_sections
from snapshot_analyzer.core.managers.config_manager import config_manager
from snapshot_analyzer.dom.core import SnapshotNode, walk
from snapshot_analyzer.dom.signature import detect_patterns
from snapshot_analyzer.model import AnalysisReport, AnalyzerSettings, StyleRecord
from snapshot_analyzer.services.component_map_service import build_component_map
from snapshot_analyzer.tokens.styling import build_styling_config, extract_styles
from snapshot_analyzer.tokens.token_extractor import extract_tokens

logger = logging.getLogger(__name__)


class AnalysisController:
    """
    Orchestrates the analysis of one snapshot tree.

    Each part of the report comes from its own independent walk over the
    (read-only) tree; the controller only merges the results into disjoint
    fields of a fresh AnalysisReport.
    """

    def __init__(self, settings: Optional[AnalyzerSettings] = None):
        self.settings = settings or config_manager.analyzer_settings()

    def generate_report(self, root: Optional[SnapshotNode]) -> AnalysisReport:
        """
        Runs every analysis pass over the tree.

        A missing tree gives an empty report rather than an error.
        """
        if root is None:
            logger.info("No snapshot supplied; returning empty report.")
            return AnalysisReport()

        max_depth = self.settings.max_depth
        traversal = walk(root, max_depth)
        section_scan = scan_sections(root, self.settings.section_max_depth)
        truncated = traversal.truncated or section_scan.truncated
        if truncated:
            logger.warning(
                "Snapshot is deeper than the analysis ceilings (%d levels, %d for sections); "
                "deeper branches were left out.",
                max_depth, self.settings.section_max_depth
            )

        report = AnalysisReport(
            components=analyze_components(root, max_depth),
            layouts=analyze_layouts(root, max_depth),
            design_tokens=extract_tokens(root, max_depth),
            repeated_patterns=detect_patterns(root, self.settings.max_examples, max_depth),
            sections=section_scan.sections,
            node_count=len(traversal.nodes),
            truncated=truncated,
        )

        logger.info(
            "Analysis complete: %d nodes, %d components, %d layouts, %d repeated patterns, %d sections.",
            report.node_count, len(report.components), len(report.layouts),
            len(report.repeated_patterns), len(report.sections)
        )
        return report

    def generate_artifacts(self, root: Optional[SnapshotNode]) -> Dict[str, Any]:
        """
        Report plus the derived outputs the emitters consume: the component map,
        the styling config and the per-node style records.
        """
        report = self.generate_report(root)
        styles: List[StyleRecord] = extract_styles(root, self.settings.max_depth) if root else []
        return {
            "report": report,
            "componentMap": build_component_map(report),
            "stylingConfig": build_styling_config(report.design_tokens),
            "styles": styles,
        }
