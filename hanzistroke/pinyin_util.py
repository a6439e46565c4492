from pypinyin import pinyin, Style

from hanzistroke.logging import log_debug

# Returned whenever the lookup fails or yields nothing
PINYIN_FALLBACK = "?"

# Include broader CJK ranges (radicals + extensions)
CJK_RANGES = [
    (0x2E80, 0x2EFF),  # CJK Radicals Supplement
    (0x2F00, 0x2FDF),  # Kangxi Radicals
    (0x3400, 0x4DBF),  # CJK Ext A
    (0x4E00, 0x9FFF),  # CJK Unified Ideographs
    (0xF900, 0xFAFF),  # CJK Compatibility Ideographs
    (0x20000, 0x2A6DF), # Ext B
    (0x2A700, 0x2B73F), # Ext C
    (0x2B740, 0x2B81F), # Ext D
    (0x2B820, 0x2CEAF), # Ext E
    (0x2CEB0, 0x2EBEF), # Ext F
    (0x30000, 0x3134F), # Ext G
    (0x31350, 0x323AF), # Ext H
]


def looks_cjk(ch: str) -> bool:
    if len(ch) != 1:
        return False
    cp = ord(ch)
    return any(lo <= cp <= hi for lo, hi in CJK_RANGES)


def resolve(text):
    """Tone-marked pinyin of the first character of ``text``.

    Only the first reading is used for heteronyms, and everything after the
    first character is ignored. Any failure gives ``PINYIN_FALLBACK``.
    """
    try:
        result = pinyin(text, style=Style.TONE, heteronym=False)
    except Exception as e:
        log_debug(f"pinyin lookup failed for {text!r}: {e}")
        return PINYIN_FALLBACK

    if result and result[0]:
        return result[0][0] or PINYIN_FALLBACK
    return PINYIN_FALLBACK


def generate_pinyin(text):
    # Use TONE style for pinyin with tone marks (e.g., zhōng)
    # pinyin returns a list of lists, e.g. [['zhōng'], ['guó']]
    result = pinyin(text, style=Style.TONE, heteronym=False)

    flat_list = []
    for item in result:
        if item:
            flat_list.append(item[0])
        else:
            flat_list.append('')

    return ' '.join(flat_list)
