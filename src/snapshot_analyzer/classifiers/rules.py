# src/snapshot_analyzer/classifiers/rules.py
from typing import Iterable, List, NamedTuple, Optional, Sequence, Tuple

from snapshot_analyzer.dom.core import SnapshotNode


class NodeFacts(NamedTuple):
    """The normalised view of a node that classification rules look at."""
    tag: str
    classes: str  # space-joined, lowercase
    id: str  # lowercase, '' when absent
    role: str  # lowercase `role` attribute, '' when absent


def node_facts(node: SnapshotNode) -> NodeFacts:
    return NodeFacts(
        tag=node.tag.lower(),
        classes=" ".join(node.classes).lower(),
        id=(node.id or "").lower(),
        role=node.attributes.get("role", "").lower(),
    )


class ClassificationRule:
    """
    One (predicate, result) entry of an ordered rule list.

    The predicate is kept as data: a node matches when its tag is in `tags`, or
    its class string contains one of `class_keywords`, or its id contains one
    of `id_keywords`, or its role is in `roles`. Substring matching is
    intentional ("navbar" contains "nav").
    """

    def __init__(
            self,
            result: str,
            tags: Iterable[str] = (),
            class_keywords: Iterable[str] = (),
            id_keywords: Iterable[str] = (),
            roles: Iterable[str] = ()
    ):
        self.result = result
        self.tags = tuple(tags)
        self.class_keywords = tuple(class_keywords)
        self.id_keywords = tuple(id_keywords)
        self.roles = tuple(roles)

    def matches(self, facts: NodeFacts) -> bool:
        if facts.tag in self.tags:
            return True
        if any(k in facts.classes for k in self.class_keywords):
            return True
        if facts.id and any(k in facts.id for k in self.id_keywords):
            return True
        return bool(facts.role) and facts.role in self.roles

    def __repr__(self) -> str:
        return (
            f"ClassificationRule({self.result!r}, tags={self.tags}, classes={self.class_keywords}, "
            f"ids={self.id_keywords}, roles={self.roles})"
        )


def first_match(rules: Sequence[ClassificationRule], facts: NodeFacts, default: str) -> str:
    """Evaluates rules top to bottom; the first match wins, else `default`."""
    for rule in rules:
        if rule.matches(facts):
            return rule.result
    return default


# --- COMPONENT TYPES ---
# Order is priority: a <button class="nav"> is a button, not navigation.

COMPONENT_RULES: List[ClassificationRule] = [
    ClassificationRule("button", tags=["button"], class_keywords=["button"], id_keywords=["btn"]),
    ClassificationRule("navigation", tags=["nav"], class_keywords=["nav", "menu"]),
    ClassificationRule("form", tags=["form"], class_keywords=["form"]),
    ClassificationRule("input", tags=["input", "select", "textarea"]),
    ClassificationRule("image", tags=["img", "picture"]),
    ClassificationRule("card", tags=["card"], class_keywords=["card"]),
    ClassificationRule("modal", tags=["modal"], class_keywords=["modal", "dialog"]),
    ClassificationRule("header", tags=["header"], id_keywords=["header"]),
    ClassificationRule("footer", tags=["footer"], id_keywords=["footer"]),
    ClassificationRule("sidebar", tags=["aside"], id_keywords=["sidebar"]),
]

COMPONENT_FALLBACK = "container"

# --- SECTION PURPOSES ---

SECTION_TAGS = ("header", "nav", "main", "section", "article", "aside", "footer")
SECTION_ROLES = ("banner", "navigation", "main", "complementary", "contentinfo")

SECTION_RULES: List[ClassificationRule] = [
    ClassificationRule("header", tags=["header"], id_keywords=["header"], roles=["banner"]),
    ClassificationRule("navigation", tags=["nav"], class_keywords=["nav"], roles=["navigation"]),
    ClassificationRule("main-content", tags=["main"], id_keywords=["main"], roles=["main"]),
    ClassificationRule("sidebar", tags=["aside"], id_keywords=["sidebar"], roles=["complementary"]),
    ClassificationRule("footer", tags=["footer"], id_keywords=["footer"], roles=["contentinfo"]),
    ClassificationRule("content-section", tags=["section", "article"]),
]

SECTION_FALLBACK = "unknown"


# --- KEYWORD RULES (component map) ---
# (keywords, result) pairs matched as substrings of the lowercase class string.

KeywordRule = Tuple[Tuple[str, ...], str]

BUTTON_VARIANT_RULES: List[KeywordRule] = [
    (("primary",), "default"),
    (("secondary",), "outline"),
    (("danger", "destructive"), "destructive"),
    (("ghost",), "ghost"),
]

BUTTON_SIZE_RULES: List[KeywordRule] = [
    (("lg", "large"), "lg"),
    (("sm", "small"), "sm"),
]

INPUT_TYPE_RULES: List[KeywordRule] = [
    (("email",), "email"),
    (("password",), "password"),
    (("search",), "search"),
    (("number",), "number"),
]

NAVIGATION_LAYOUT_RULES: List[KeywordRule] = [
    (("grid",), "grid"),
    (("flex",), "flex"),
    (("block",), "block"),
]


def match_keywords(rules: Sequence[KeywordRule], text: Optional[str], default: str) -> str:
    """First rule with a keyword contained in `text` wins; otherwise `default`."""
    haystack = (text or "").lower()
    for keywords, result in rules:
        if any(k in haystack for k in keywords):
            return result
    return default
