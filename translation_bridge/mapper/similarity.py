"""Similarity factors used to score candidate target types."""
from typing import Any, Dict, List

SEMANTIC_GROUPS: List[List[str]] = [
    ["button", "btn", "cta", "link-button"],
    ["card", "box", "panel", "content-box", "blurb", "icon-box"],
    ["container", "wrapper", "section", "div"],
    ["heading", "title", "header", "h1", "h2", "h3", "h4", "h5", "h6"],
    ["text", "paragraph", "content", "rich-text", "text-editor"],
    ["image", "img", "picture", "photo"],
    ["video", "embed", "media"],
    ["slider", "carousel", "slideshow"],
    ["tabs", "tabbed-content"],
    ["accordion", "collapse", "toggle"],
    ["form", "contact-form", "input-form"],
    ["gallery", "image-gallery", "photo-gallery"],
    ["divider", "separator", "hr"],
    ["spacer", "gap", "spacing"],
    ["icon", "fontawesome", "svg-icon"],
]

RELATED_CATEGORIES: Dict[str, List[str]] = {
    "layout": ["structure", "container", "grid"],
    "content": ["text", "media", "typography"],
    "interactive": ["form", "input", "button"],
    "media": ["image", "video", "gallery"],
    "navigation": ["menu", "tabs", "breadcrumbs"],
}

# canonical name -> equivalent attribute keys (canonical included)
SEMANTIC_ATTRIBUTES: Dict[str, List[str]] = {
    "url": ["url", "link", "href", "src"],
    "text": ["text", "label", "content", "title"],
    "color": ["color", "bg_color", "background", "text_color"],
    "size": ["size", "width", "height", "dimension"],
    "alignment": ["alignment", "align", "text_align", "position"],
    "image": ["image", "src", "image_url", "img"],
}

SIMPLE_TYPES = ("button", "heading", "text", "image", "divider")
COMPLEX_TYPES = ("slider", "accordion", "tabs", "carousel", "modal")


def levenshtein(a: str, b: str) -> int:
    """Edit distance between two strings."""
    if len(a) < len(b):
        a, b = b, a
    previous = list(range(len(b) + 1))
    for i, char_a in enumerate(a, start=1):
        current = [i]
        for j, char_b in enumerate(b, start=1):
            current.append(min(
                previous[j] + 1,
                current[j - 1] + 1,
                previous[j - 1] + (char_a != char_b),
            ))
        previous = current
    return previous[-1]


def calculate_type_similarity(type1: str, type2: str) -> float:
    """Score two type names: identical, same semantic group, or edit distance."""
    if type1 == type2:
        return 1.0

    type1 = (type1 or "").strip().lower()
    type2 = (type2 or "").strip().lower()

    if type1 == type2:
        return 1.0

    for group in SEMANTIC_GROUPS:
        if type1 in group and type2 in group:
            return 0.9

    max_len = max(len(type1), len(type2))
    similarity = 1.0 - (levenshtein(type1, type2) / max_len)
    return max(0.0, similarity)


def calculate_category_similarity(cat1: str, cat2: str) -> float:
    if cat1 == cat2:
        return 1.0

    for main, related in RELATED_CATEGORIES.items():
        if cat1 == main and cat2 in related:
            return 0.7
        if cat2 == main and cat1 in related:
            return 0.7

    return 0.3


def semantic_group_for(key: str) -> List[str]:
    """Every variant sharing a semantic group with ``key``.

    A key can sit in several groups (``src`` is both a url and an image),
    so the groups are merged in declaration order.
    """
    variants: List[str] = []
    for group in SEMANTIC_ATTRIBUTES.values():
        if key in group:
            variants.extend(variant for variant in group if variant not in variants)
    return variants


def declared_attribute_keys(candidate_attributes: Any) -> List[str]:
    if isinstance(candidate_attributes, dict):
        return list(candidate_attributes.keys())
    if isinstance(candidate_attributes, (list, tuple)):
        return [str(key) for key in candidate_attributes]
    return []


def calculate_attribute_compatibility(source_attrs: Dict[str, Any], candidate_attributes: Any) -> float:
    """Fraction of the candidate's declared attributes the source can satisfy.

    Exact keys earn full credit, keys from the same semantic group 0.8.
    A candidate that declares nothing scores a neutral 0.5.
    """
    target_keys = declared_attribute_keys(candidate_attributes)
    if not target_keys:
        return 0.5

    compatible = 0.0
    for target_key in target_keys:
        if target_key in source_attrs:
            compatible += 1.0
            continue

        group = semantic_group_for(target_key)
        if group and any(variant in source_attrs for variant in group):
            compatible += 0.8

    return min(1.0, compatible / len(target_keys))


def calculate_visual_similarity(component_type: str, category: str, child_count: int, has_styles: bool) -> float:
    score = 0.5

    if category == "layout":
        score += 0.3

    score -= min(0.2, child_count * 0.02)

    if has_styles:
        score += 0.2

    if component_type in SIMPLE_TYPES:
        score += 0.3

    if component_type in COMPLEX_TYPES:
        score += 0.1

    return max(0.0, min(1.0, score))


def clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    return max(low, min(high, value))


def weighted_confidence(scores: Dict[str, float], weights: Dict[str, float], historical_weight: float) -> float:
    """Combine factor scores into a confidence in [0, 1]."""
    total = sum(scores[name] * weight for name, weight in weights.items())
    total += scores.get("historical", 0.5) * historical_weight
    return clamp(total)
