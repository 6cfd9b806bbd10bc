"""Simple two-language (ko/en) translation helper."""

_STRINGS: dict[str, dict[str, str]] = {
    "page_title": {
        "ko": "다음 블록",
        "en": "NextBlock",
    },
    "label_height": {
        "ko": "블록 높이",
        "en": "Block height",
    },
    "label_weight": {
        "ko": "블록 무게",
        "en": "Block weight",
    },
    "label_tx_count": {
        "ko": "트랜잭션 수",
        "en": "Transactions",
    },
    "btn_observe": {
        "ko": "✦ 관측하기",
        "en": "✦ Observe",
    },
    "placeholder": {
        "ko": "블록 높이를 입력하고 하늘을 관측하세요",
        "en": "Enter a block height to observe its sky",
    },
    "heading_date": {
        "ko": "천문 날짜",
        "en": "Astronomical date",
    },
    "heading_lunar": {
        "ko": "달",
        "en": "Moon",
    },
    "heading_solar": {
        "ko": "태양",
        "en": "Sun",
    },
    "heading_tidal": {
        "ko": "조석",
        "en": "Tide",
    },
    "heading_atmosphere": {
        "ko": "대기",
        "en": "Atmosphere",
    },
    "next_in": {
        "ko": "다음: {name} ({blocks}블록 후)",
        "en": "next: {name} in {blocks} blocks",
    },
    "atmosphere_unbounded": {
        "ko": "∞ (무게 없는 블록에 트랜잭션 있음)",
        "en": "∞ (transactions in a weightless block)",
    },
    "error_height": {
        "ko": "블록 높이는 정수여야 해요. ({error})",
        "en": "Block height must be a whole number. ({error})",
    },
    "saved": {
        "ko": "저장됨: {path}",
        "en": "Saved: {path}",
    },
}


def t(key: str, lang: str) -> str:
    """Return the translated string for key in lang.

    Falls back to 'en', then to the key itself if not found.
    """
    entry = _STRINGS.get(key)
    if entry is None:
        return key
    return entry.get(lang) or entry.get("en") or key
