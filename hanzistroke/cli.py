#!/usr/bin/env python3
"""
汉字拼音和笔顺工具 v2.0

Looks up the tone-marked pinyin of a character and optionally prints its
stroke order from the built-in table or writes a hanzi-writer animation page.

Usage:
  hanzi "爱"                  # pinyin only
  hanzi "爱" --stroke         # pinyin + stroke table entry
  hanzi "爱" --html           # pinyin + 爱.html animation page
  hanzi "中国" --all          # all of the above
  hanzi "中国" --full --json  # machine-readable, with the whole-string reading
"""

import argparse
import json
import sys
from typing import List, Optional

from hanzistroke import __version__
from hanzistroke.config import PageConfig, load_page_config
from hanzistroke.logging import is_debug, log_debug, set_debug
from hanzistroke.page import generate_page, page_filename, write_page
from hanzistroke.pinyin_util import PINYIN_FALLBACK, generate_pinyin, looks_cjk, resolve
from hanzistroke.strokes import format_strokes, lookup_strokes

USAGE = f"""
🔤 汉字拼音和笔顺工具 v{__version__}

使用方法:
  hanzi "汉字"                - 获取拼音
  hanzi "汉字" --pinyin-only  - 仅获取拼音（忽略其他选项）
  hanzi "汉字" --stroke       - 获取拼音+笔顺信息
  hanzi "汉字" --html         - 生成笔顺动画 HTML 页面
  hanzi "汉字" --all          - 获取拼音+笔顺信息+生成动画页面

其他选项:
  --full             同时显示整段文字的拼音
  --json             以 JSON 格式输出
  --out-dir DIR      HTML 页面输出目录（默认当前目录）
  --config FILE      页面配置 JSON 文件
  --no-escape        不转义页面中的汉字和拼音
  --debug            输出调试信息

示例:
  hanzi "爱"
  hanzi "中国" --all
"""


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="hanzi",
        allow_abbrev=False,
        description="Look up pinyin and stroke order for Chinese characters.",
    )
    ap.add_argument("text", nargs="?", help="Character (or characters) to look up.")
    ap.add_argument("--pinyin-only", action="store_true", help="Print only the pinyin; overrides --stroke, --html and --all.")
    ap.add_argument("--stroke", action="store_true", help="Print stroke order from the built-in table.")
    ap.add_argument("--html", action="store_true", help="Write a hanzi-writer animation page <text>.html.")
    ap.add_argument("--all", action="store_true", help="Same as --stroke --html.")
    ap.add_argument("--full", action="store_true", help="Also print the reading of every character.")
    ap.add_argument("--json", action="store_true", help="Print one JSON object instead of status lines.")
    ap.add_argument("--out-dir", default=None, help="Directory for the HTML page (default: current directory).")
    ap.add_argument("--config", default=None, help="JSON file with page options.")
    ap.add_argument("--no-escape", action="store_true", help="Insert text into the page without escaping.")
    ap.add_argument("--debug", action="store_true", help="Print debug messages to stderr.")
    ap.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return ap


def _error(message: str) -> None:
    sys.stderr.write(f"❌ {message}\n")
    sys.stderr.flush()


def main(argv: Optional[List[str]] = None) -> int:
    ap = build_argparser()
    args, unknown = ap.parse_known_args(argv)
    set_debug(args.debug)

    # A query starting with "-" lands among the unknown options
    if args.text is None and unknown:
        args.text = unknown.pop(0)

    if unknown:
        log_debug(f"ignoring unrecognized arguments: {' '.join(unknown)}")

    if args.text is None:
        print(USAGE)
        return 0

    text = args.text
    if is_debug() and (not text or not looks_cjk(text[0])):
        log_debug(f"{text!r} does not start with a CJK character")

    want_strokes = (args.stroke or args.all) and not args.pinyin_only
    want_html = (args.html or args.all) and not args.pinyin_only

    config = PageConfig()
    if want_html and args.config:
        try:
            config = load_page_config(args.config)
        except (OSError, ValueError) as e:
            _error(f"页面配置无效: {args.config}: {e}")
            return 1

    pinyin_char = resolve(text)
    result = {"text": text, "pinyin": pinyin_char}
    if args.full:
        # Whole-string reading falls back to the sentinel as well
        try:
            result["reading"] = generate_pinyin(text)
        except Exception as e:
            log_debug(f"full reading failed for {text!r}: {e}")
            result["reading"] = PINYIN_FALLBACK

    if not args.json:
        print(f"\n🔤 汉字: {text}")
        print(f"📝 拼音: {pinyin_char}")
        if "reading" in result:
            print(f"📖 全文: {result['reading']}")

    if want_strokes:
        entry = lookup_strokes(text)
        result["strokes"] = entry.to_dict()
        if not args.json:
            print("\n🖊️ 笔顺信息:")
            for line in format_strokes(entry):
                print(f"   {line}")

    if want_html:
        page = generate_page(text, pinyin_char, config=config, escape=not args.no_escape)
        try:
            filepath = write_page(text, page, out_dir=args.out_dir)
        except OSError as e:
            _error(f"无法写入 {page_filename(text)}: {e}")
            return 1
        result["html"] = str(filepath)
        if not args.json:
            print(f"\n✅ 已生成笔顺动画页面: {page_filename(text)}")
            print("   用浏览器打开即可查看动画和练习书写！\n")
            print(f"📂 文件路径: {filepath}")

    if args.json:
        print(json.dumps(result, ensure_ascii=False))
    else:
        print("")
    return 0


if __name__ == "__main__":
    sys.exit(main())
