from __future__ import annotations

from typing import Any

from pedigree_engine.domain.models.breeding import MatchWarning
from pedigree_engine.domain.value_objects.coi_tier import CoiTier
from pedigree_engine.domain.value_objects.warning_level import WarningLevel

from .types import DEFAULT_LEVELS, SUPPORTED_LOCALES, WarningKey

_MESSAGES: dict[str, dict[str, str]] = {
    WarningKey.ACCEPTABLE_RELATEDNESS: {
        "en": "Distantly related (COI {coi}). Acceptable for breeding.",
        "th": "มีความเป็นเครือญาติห่าง ๆ (COI {coi}) อยู่ในเกณฑ์ยอมรับได้",
    },
    WarningKey.MODERATE_INBREEDING_RISK: {
        "en": "Moderate inbreeding risk (COI {coi}).",
        "th": "ความเสี่ยงเลือดชิดปานกลาง (COI {coi})",
    },
    WarningKey.HIGH_INBREEDING_RISK: {
        "en": "High inbreeding risk (COI {coi}).",
        "th": "ความเสี่ยงเลือดชิดสูง (COI {coi})",
    },
    WarningKey.SEVERE_INBREEDING_RISK: {
        "en": "Too closely related (COI {coi}). Do not breed.",
        "th": "เลือดชิดเกินไป (COI {coi}) ไม่ควรผสมพันธุ์",
    },
    WarningKey.SIBLING_MATING: {
        "en": "{name} is a {relationship} of the focal animal.",
        "th": "{name} เป็นพี่น้อง ({relationship}) กับตัวที่เลือก",
    },
    WarningKey.COI_ABOVE_LIMIT: {
        "en": "COI {coi} is above the requested limit of {limit}.",
        "th": "ค่า COI {coi} เกินขีดจำกัดที่กำหนด {limit}",
    },
    WarningKey.AGE_OUT_OF_RANGE: {
        "en": "{name} is {age} years old, outside the {min_age}-{max_age} year breeding range.",
        "th": "{name} อายุ {age} ปี อยู่นอกช่วงอายุผสมพันธุ์ {min_age}-{max_age} ปี",
    },
    WarningKey.AGE_UNKNOWN: {
        "en": "Birth date of {name} is unknown, so age could not be checked.",
        "th": "ไม่ทราบวันเกิดของ {name} จึงตรวจสอบอายุไม่ได้",
    },
    WarningKey.BIRTH_DATE_INCONSISTENT: {
        "en": "The pedigree of {name} lists a parent born after its offspring. Please check.",
        "th": "สายเลือดของ {name} มีพ่อแม่ที่เกิดหลังลูก กรุณาตรวจสอบ",
    },
    WarningKey.MIXED_BREED: {
        "en": "Different breeds ({breed_a} x {breed_b}).",
        "th": "คนละสายพันธุ์ ({breed_a} x {breed_b})",
    },
    WarningKey.SAME_SEX: {
        "en": "{name_a} and {name_b} are the same sex and cannot be paired.",
        "th": "{name_a} และ {name_b} เป็นเพศเดียวกัน ไม่สามารถผสมพันธุ์ได้",
    },
}

_STATUS_LABELS: dict[CoiTier, dict[str, str]] = {
    CoiTier.EXCELLENT: {"en": "Excellent", "th": "ยอดเยี่ยม"},
    CoiTier.GOOD: {"en": "Good", "th": "ดี"},
    CoiTier.ACCEPTABLE: {"en": "Acceptable", "th": "พอรับได้"},
    CoiTier.RISKY: {"en": "Risky", "th": "เสี่ยง"},
    CoiTier.NOT_RECOMMENDED: {"en": "Not recommended", "th": "ไม่แนะนำ"},
}


def resolve_locale(locale: str | None) -> str:
    if not locale:
        return SUPPORTED_LOCALES[0]
    short = locale.split("-", 1)[0].split("_", 1)[0].lower()
    return short if short in SUPPORTED_LOCALES else SUPPORTED_LOCALES[0]


def format_coi(value: float) -> str:
    return f"{value * 100:.2f}%"


def build_warning(
    key: str,
    *,
    locale: str | None = None,
    level: WarningLevel | None = None,
    **kwargs: Any,
) -> MatchWarning:
    """
    Central place to build warning messages from templates.
    Unknown keys are a programming error and raise KeyError.
    """
    templates = _MESSAGES[key]
    message = templates[resolve_locale(locale)].format(**kwargs)
    return MatchWarning(level=level or DEFAULT_LEVELS[key], key=key, message=message)


def status_label(status: CoiTier, locale: str | None = None) -> str:
    return _STATUS_LABELS[status][resolve_locale(locale)]


def build_summary(
    *,
    focal_label: str,
    status: CoiTier,
    count: int,
    top_label: str | None = None,
    top_score: float | None = None,
    top_coi: float | None = None,
    locale: str | None = None,
) -> str:
    lang = resolve_locale(locale)
    label = status_label(status, lang)
    if count == 0 or top_label is None:
        if lang == "th":
            return f"ไม่พบคู่ผสมที่เหมาะสมสำหรับ {focal_label} ในขณะนี้"
        return f"No suitable breeding matches found for {focal_label} at this time"
    score = round(top_score or 0.0)
    coi = format_coi(top_coi or 0.0)
    if lang == "th":
        return (
            f"พบ {count} คู่ผสมที่เป็นไปได้\n"
            f"แนะนำ: {top_label} (คะแนน {score}/100)\n"
            f"ค่า COI: {coi}\n"
            f"สถานะ: {label}"
        )
    return (
        f"Found {count} possible matches\n"
        f"Recommended: {top_label} (Score {score}/100)\n"
        f"COI: {coi}\n"
        f"Status: {label}"
    )


def build_recommendation(
    *, score: float, compatible: bool, locale: str | None = None
) -> str:
    lang = resolve_locale(locale)
    rounded = round(score)
    if compatible and score >= 80:
        return f"แนะนำอย่างยิ่ง คะแนน {rounded}/100" if lang == "th" else (
            f"Highly recommended. Score {rounded}/100"
        )
    if compatible and score >= 60:
        return f"เข้าคู่กันดี คะแนน {rounded}/100" if lang == "th" else (
            f"Good match. Score {rounded}/100"
        )
    if compatible:
        return f"พอรับได้ แต่มีข้อควรระวัง ({rounded}/100)" if lang == "th" else (
            f"Acceptable, with cautions ({rounded}/100)"
        )
    return "ไม่แนะนำเนื่องจากความเสี่ยงทางพันธุกรรม" if lang == "th" else (
        "Not recommended due to genetic or compatibility risks"
    )
