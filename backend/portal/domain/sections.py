from enum import Enum

STUDY_MATERIAL_MARKER = "study material"


class SectionKind(str, Enum):
    STUDY_MATERIAL = "study_material"
    FLAT = "flat"


def infer_section_kind(title) -> SectionKind:
    """
    Default kind for a section created without one.

    Only used when the section row is first written; navigation and the
    admin editor read the stored `kind` and never look at the title again.
    """
    if isinstance(title, str) and STUDY_MATERIAL_MARKER in title.strip().lower():
        return SectionKind.STUDY_MATERIAL
    return SectionKind.FLAT


def section_kind(section) -> SectionKind:
    raw = section.get("kind") if isinstance(section, dict) else getattr(section, "kind", None)
    try:
        return SectionKind(raw)
    except ValueError:
        return SectionKind.FLAT


def is_study_material(section) -> bool:
    return section_kind(section) is SectionKind.STUDY_MATERIAL
