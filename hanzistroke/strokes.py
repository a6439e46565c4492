"""Static stroke-order table for a small set of common characters.

Entries are stored as collected and looked up by exact character; anything
else gets ``UNKNOWN_ENTRY`` pointing the user at a fuller stroke database.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Optional, Tuple, Union

UNKNOWN_STROKES = "未知"


@dataclass(frozen=True)
class StrokeEntry:
    stroke_count: Union[int, str]
    stroke_names: Tuple[str, ...]
    note: Optional[str] = None

    @property
    def is_known(self) -> bool:
        return self.stroke_count != UNKNOWN_STROKES

    def to_dict(self) -> Dict[str, object]:
        data: Dict[str, object] = {
            "stroke_count": self.stroke_count,
            "stroke_names": list(self.stroke_names),
        }
        if self.note:
            data["note"] = self.note
        return data


UNKNOWN_ENTRY = StrokeEntry(
    stroke_count=UNKNOWN_STROKES,
    stroke_names=("请查询专业笔顺数据库",),
    note="基础笔顺数据有限，建议使用 hanzi-writer 在线查询",
)

# character -> (stroke count, stroke names in writing order)
_RAW_TABLE = {
    "一": (1, ["横"]),
    "二": (2, ["横", "横"]),
    "三": (3, ["横", "横", "横"]),
    "十": (2, ["横", "竖"]),
    "人": (2, ["撇", "捺"]),
    "大": (3, ["横", "撇", "捺"]),
    "小": (3, ["竖钩", "撇", "点"]),
    "山": (3, ["竖", "竖折", "竖"]),
    "水": (4, ["竖钩", "横撇", "撇", "捺"]),
    "火": (4, ["点", "点", "撇", "捺"]),
    "木": (4, ["横", "竖", "撇", "捺"]),
    "土": (3, ["横", "竖", "横"]),
    "日": (4, ["竖", "横折", "横", "横", "竖"]),
    "月": (4, ["撇", "横折钩", "横", "横", "横"]),
    "口": (3, ["竖", "横折", "横", "竖", "横"]),
    "中": (4, ["竖", "横折", "横", "横", "竖"]),
    "国": (8, ["竖", "横折", "横", "竖", "横折", "横", "横", "横"]),
    "爱": (10, ["撇", "点", "横撇", "横", "横撇", "捺", "点", "斜钩", "点", "点"]),
    "学": (8, ["点", "点", "撇", "横", "竖钩", "点", "撇", "点"]),
    "我": (7, ["撇", "横", "竖钩", "横", "竖", "撇", "捺"]),
    "你": (7, ["撇", "竖", "横", "竖钩", "点", "斜钩", "点"]),
    "他": (5, ["撇", "竖", "横折钩", "横", "竖弯钩"]),
    "她": (6, ["撇点", "撇", "横", "竖折钩", "横", "竖弯钩"]),
    "们": (5, ["撇", "竖", "横折钩", "横", "竖弯钩"]),
    "的": (8, ["撇", "横", "横折钩", "横", "竖", "横折", "横", "横"]),
    "了": (2, ["横折钩", "竖弯钩"]),
    "在": (6, ["横", "竖", "横折钩", "横", "点", "横"]),
    "有": (6, ["横", "撇", "横折钩", "横", "竖", "横"]),
    "和": (8, ["撇", "横", "竖", "横折钩", "横", "竖弯钩", "点", "点"]),
    "是": (9, ["竖", "横折", "横", "竖", "横折钩", "横", "竖", "点", "横"]),
    "来": (7, ["横", "竖", "横折钩", "横", "竖", "撇", "捺"]),
    "不": (4, ["横", "竖", "点", "捺"]),
    "就": (12, ["点", "横", "竖", "横折钩", "横", "竖", "横折", "横", "横折钩", "点", "斜钩", "点"]),
    "这": (7, ["点", "横折", "横", "撇", "点", "捺", "点"]),
    "个": (3, ["撇", "横", "竖"]),
    "上": (3, ["竖", "横", "横"]),
    "下": (3, ["横", "竖", "点"]),
    "多": (6, ["撇", "点", "撇", "横折钩", "点", "点"]),
    "少": (4, ["竖", "撇", "点", "撇"]),
    "吗": (6, ["竖", "横折钩", "横", "横", "斜钩", "点"]),
    "呢": (8, ["竖", "横折钩", "横", "横", "斜钩", "点", "撇", "点"]),
    "吧": (7, ["竖", "横折钩", "横", "横", "斜钩", "点", "捺"]),
    "啊": (10, ["横", "竖折", "竖", "横折钩", "横", "竖", "横折", "横", "竖", "点"]),
    "谁": (10, ["点", "横折钩", "横", "横", "点", "横", "竖", "横", "竖弯钩", "点"]),
}

STROKE_TABLE = MappingProxyType({
    ch: StrokeEntry(stroke_count=count, stroke_names=tuple(names))
    for ch, (count, names) in _RAW_TABLE.items()
})


def lookup_strokes(character: str) -> StrokeEntry:
    return STROKE_TABLE.get(character, UNKNOWN_ENTRY)


def format_strokes(entry):
    # heading is printed by the caller
    lines = [
        f"总笔画: {entry.stroke_count}",
        f"笔顺: {' → '.join(entry.stroke_names)}",
    ]
    if entry.note:
        lines.append(f"⚠️ {entry.note}")
    return lines
