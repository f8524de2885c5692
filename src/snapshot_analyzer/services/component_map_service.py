# src/snapshot_analyzer/services/component_map_service.py
import logging
from typing import Any, Dict, List, Optional

from snapshot_analyzer.classifiers.rules import (
    BUTTON_SIZE_RULES,
    BUTTON_VARIANT_RULES,
    INPUT_TYPE_RULES,
    NAVIGATION_LAYOUT_RULES,
    match_keywords,
)
from snapshot_analyzer.model import AnalysisReport, ComponentRecord, SectionRecord

logger = logging.getLogger(__name__)

COMPONENT_MAP_CATEGORIES = ("buttons", "forms", "navigation", "cards", "modals", "layouts", "inputs")


def _class_string(classes: Optional[List[str]]) -> str:
    return " ".join(classes or []).lower()


class ComponentMapService:
    """
    Joins classifier output into per-category descriptors for the template emitter.

    Pure data transformation: each derived property is a keyword match with
    an explicit default, so a missing signal never raises.
    """

    def __init__(self, report: Optional[AnalysisReport]):
        self.report = report or AnalysisReport()

    def build_component_map(self) -> Dict[str, List[Dict[str, Any]]]:
        component_map = {
            "buttons": self.map_buttons(),
            "forms": self.map_forms(),
            "navigation": self.map_navigation(),
            "cards": self.map_cards(),
            "modals": self.map_modals(),
            "layouts": self.map_layouts(),
            "inputs": self.map_inputs(),
        }
        logger.debug(
            "Component map: %s",
            ", ".join(f"{k}={len(v)}" for k, v in component_map.items())
        )
        return component_map

    # --- HELPERS ---

    def _of_type(self, semantic_type: str) -> List[ComponentRecord]:
        return [c for c in self.report.components if c.estimated_type == semantic_type]

    @staticmethod
    def _base(comp: ComponentRecord, component: str) -> Dict[str, Any]:
        return {
            "name": comp.name,
            "originalTag": comp.tag,
            "classes": list(comp.classes),
            "component": component,
        }

    @staticmethod
    def button_variant(comp: ComponentRecord) -> str:
        return match_keywords(BUTTON_VARIANT_RULES, _class_string(comp.classes), "default")

    @staticmethod
    def button_size(comp: ComponentRecord) -> str:
        return match_keywords(BUTTON_SIZE_RULES, _class_string(comp.classes), "default")

    @staticmethod
    def input_type(comp: ComponentRecord) -> str:
        return match_keywords(INPUT_TYPE_RULES, _class_string(comp.classes), "text")

    @staticmethod
    def navigation_layout(section: Optional[SectionRecord]) -> str:
        if section is None:
            return "flex"
        return match_keywords(NAVIGATION_LAYOUT_RULES, _class_string(section.classes), "flex")

    # --- CATEGORIES ---

    def map_buttons(self) -> List[Dict[str, Any]]:
        buttons = []
        for comp in self._of_type("button"):
            entry = self._base(comp, "Button")
            entry["props"] = {
                "variant": self.button_variant(comp),
                "size": self.button_size(comp),
                "disabled": any("disabled" in c for c in comp.classes),
            }
            buttons.append(entry)
        return buttons

    def map_forms(self) -> List[Dict[str, Any]]:
        return [dict(self._base(comp, "Form"), fields=[]) for comp in self._of_type("form")]

    def map_navigation(self) -> List[Dict[str, Any]]:
        navs = []
        for section in self.report.sections:
            if section.purpose != "navigation":
                continue
            navs.append({
                "name": section.id or "Navigation",
                "originalTag": section.tag,
                "classes": list(section.classes),
                "component": "Navigation",
                "layout": self.navigation_layout(section),
            })
        return navs

    def map_cards(self) -> List[Dict[str, Any]]:
        return [
            dict(
                self._base(comp, "Card"),
                hasImage=comp.child_count > 0,
                hasFooter=comp.child_count > 2,
            )
            for comp in self._of_type("card")
        ]

    def map_modals(self) -> List[Dict[str, Any]]:
        return [dict(self._base(comp, "Dialog"), hasCloseButton=True) for comp in self._of_type("modal")]

    def map_layouts(self) -> List[Dict[str, Any]]:
        layouts = []
        for record in self.report.layouts:
            layouts.append({
                "tag": record.tag,
                "id": record.id,
                "classes": list(record.classes),
                "layoutType": record.layout.type,
                "layoutProps": record.layout.model_dump(mode="json", exclude_none=True),
                "childCount": record.child_count,
            })
        return layouts

    def map_inputs(self) -> List[Dict[str, Any]]:
        return [
            dict(self._base(comp, "Input"), type=self.input_type(comp))
            for comp in self._of_type("input")
        ]


def build_component_map(report: Optional[AnalysisReport]) -> Dict[str, List[Dict[str, Any]]]:
    return ComponentMapService(report).build_component_map()
