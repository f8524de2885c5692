# src/snapshot_analyzer/model.py
from typing import Optional, List, Dict, Any
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from snapshot_analyzer.dom.core import Rect, MAX_DEPTH

# Closed set of component roles the classifier can assign.
SEMANTIC_TYPES = (
    "button", "navigation", "form", "input", "image", "card",
    "modal", "header", "footer", "sidebar", "container",
)


class ReportModel(BaseModel):
    """Base for every report shape: snake_case in Python, camelCase on the wire."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class NodeRef(ReportModel):
    """Minimal description of a node, used as a pattern example."""
    tag: str
    id: Optional[str] = None
    classes: List[str] = Field(default_factory=list)


class PatternGroup(ReportModel):
    """A signature seen more than once, with the first few occurrences."""
    count: int
    examples: List[NodeRef] = Field(default_factory=list)


class ComponentRecord(ReportModel):
    """
    A structurally interesting node with its estimated semantic type.
    """
    name: str
    tag: str
    id: Optional[str] = None
    classes: List[str] = Field(default_factory=list)
    signature: str
    child_count: int = 0
    has_interactive_elements: bool = False
    estimated_type: str = "container"


class LayoutDescriptor(ReportModel):
    """Layout facts read from computed style; unset fields are omitted on export."""
    type: str
    direction: Optional[str] = None
    justify: Optional[str] = None
    align: Optional[str] = None
    gap: Optional[str] = None
    columns: Optional[str] = None
    rows: Optional[str] = None
    width: Optional[str] = None
    height: Optional[str] = None


class LayoutRecord(ReportModel):
    tag: str
    id: Optional[str] = None
    classes: List[str] = Field(default_factory=list)
    layout: LayoutDescriptor
    child_count: int = 0


class SectionRecord(ReportModel):
    """A landmark node (header, nav, main, ...) and its guessed purpose."""
    tag: str
    id: Optional[str] = None
    classes: List[str] = Field(default_factory=list)
    rect: Rect = Field(default_factory=Rect)
    child_count: int = 0
    purpose: str = "unknown"


class DesignTokenPalette(ReportModel):
    """
    Distinct raw style values in order of discovery.

    Values stay raw here; naming them is the quantizer's job and only happens
    when a consumer asks for it.
    """
    colors: List[str] = Field(default_factory=list)
    font_sizes: List[str] = Field(default_factory=list)
    font_weights: List[str] = Field(default_factory=list)
    spacing: List[str] = Field(default_factory=list)
    border_radii: List[str] = Field(default_factory=list)
    shadows: List[str] = Field(default_factory=list)


class StyleRecord(ReportModel):
    """Per-node style entry with the utility classes it converts to."""
    selector: str
    style: Dict[str, str] = Field(default_factory=dict)
    utility_classes: List[str] = Field(default_factory=list)


class AnalysisReport(ReportModel):
    """
    Aggregate output of one analysis run.

    Built fresh from a single snapshot tree; carries no timestamp so that
    two runs over the same snapshot serialise identically.
    """
    components: List[ComponentRecord] = Field(default_factory=list)
    layouts: List[LayoutRecord] = Field(default_factory=list)
    design_tokens: DesignTokenPalette = Field(default_factory=DesignTokenPalette)
    repeated_patterns: Dict[str, PatternGroup] = Field(default_factory=dict)
    sections: List[SectionRecord] = Field(default_factory=list)
    node_count: int = 0
    truncated: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready dict with camelCase keys, unset layout fields dropped."""
        data = self.model_dump(mode="json", by_alias=True)
        for layout in data["layouts"]:
            layout["layout"] = {k: v for k, v in layout["layout"].items() if v is not None}
        return data


class AnalyzerSettings(BaseModel):
    """Tunables for a run; normally populated from the `analysis` config section."""
    max_depth: int = MAX_DEPTH
    section_max_depth: int = 10
    max_examples: int = 3
