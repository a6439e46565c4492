"""Standalone HTML page that animates a character with hanzi-writer.

The page has no local assets: styles and script are inline and hanzi-writer
itself is loaded from ``PageConfig.cdn_url`` when the page is opened.
"""

import html
import json
from pathlib import Path
from string import Template
from typing import Optional, Union

from hanzistroke.config import PageConfig
from hanzistroke.logging import log_debug

# Characters that must not appear raw inside an inline <script> string literal
_JS_UNSAFE = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}

PAGE_TEMPLATE = Template("""<!DOCTYPE html>
<html lang="zh-CN">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>汉字 "$char" - 拼音: $pinyin</title>
    <script src="$cdn_url"></script>
    <style>
        * {
            margin: 0;
            padding: 0;
            box-sizing: border-box;
        }

        body {
            font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, 'Helvetica Neue', Arial, sans-serif;
            background: linear-gradient(135deg, #667eea 0%, #764ba2 100%);
            min-height: 100vh;
            display: flex;
            flex-direction: column;
            align-items: center;
            padding: 40px 20px;
        }

        .container {
            background: white;
            border-radius: 24px;
            padding: 40px;
            box-shadow: 0 25px 80px rgba(0,0,0,0.3);
            max-width: 500px;
            width: 100%;
            text-align: center;
            animation: fadeIn 0.6s ease-out;
        }

        .char-display {
            font-size: 120px;
            font-weight: bold;
            color: #2c3e50;
            margin-bottom: 10px;
            text-shadow: 3px 3px 6px rgba(0,0,0,0.1);
        }

        .pinyin {
            font-size: 36px;
            color: #e74c3c;
            margin-bottom: 30px;
            font-weight: 500;
        }

        #character-target {
            width: ${width}px;
            height: ${height}px;
            margin: 20px auto;
            background: #f8f9fa;
            border-radius: 16px;
            border: 3px dashed #dee2e6;
        }

        .btn-group {
            display: flex;
            flex-wrap: wrap;
            gap: 12px;
            justify-content: center;
            margin-top: 30px;
        }

        button {
            padding: 14px 28px;
            font-size: 16px;
            font-weight: 600;
            border: none;
            border-radius: 12px;
            cursor: pointer;
            transition: all 0.3s cubic-bezier(0.4, 0, 0.2, 1);
            display: flex;
            align-items: center;
            gap: 8px;
        }

        button:hover {
            transform: translateY(-3px);
            box-shadow: 0 8px 25px rgba(0,0,0,0.2);
        }

        button:active {
            transform: translateY(-1px);
        }

        .btn-primary {
            background: linear-gradient(135deg, #667eea 0%, #764ba2 100%);
            color: white;
        }

        .btn-success {
            background: linear-gradient(135deg, #11998e 0%, #38ef7d 100%);
            color: white;
        }

        .btn-warning {
            background: linear-gradient(135deg, #f093fb 0%, #f5576c 100%);
            color: white;
        }

        .btn-outline {
            background: transparent;
            border: 3px solid #667eea;
            color: #667eea;
        }

        .btn-outline:hover {
            background: #667eea;
            color: white;
        }

        .info-box {
            background: linear-gradient(135deg, #f5f7fa 0%, #e4e8eb 100%);
            border-radius: 12px;
            padding: 20px;
            margin-top: 25px;
            text-align: left;
        }

        .info-box h3 {
            color: #2c3e50;
            margin-bottom: 12px;
            font-size: 16px;
        }

        .info-box p {
            color: #7f8c8d;
            line-height: 1.8;
            font-size: 14px;
        }

        .highlight {
            background: linear-gradient(120deg, #a8edea 0%, #fed6e3 100%);
            padding: 2px 8px;
            border-radius: 4px;
            font-weight: 600;
            color: #2c3e50;
        }

        @keyframes fadeIn {
            from { opacity: 0; transform: translateY(20px); }
            to { opacity: 1; transform: translateY(0); }
        }
    </style>
</head>
<body>
    <div class="container">
        <div class="char-display">$char</div>
        <div class="pinyin">$pinyin</div>

        <div id="character-target"></div>

        <div class="btn-group">
            <button class="btn-primary" onclick="animateStroke()">
                <span>🎨</span> 显示笔顺
            </button>
            <button class="btn-success" onclick="quizMode()">
                <span>✍️</span> 练习书写
            </button>
            <button class="btn-warning" onclick="slowAnimate()">
                <span>🐌</span> 慢速演示
            </button>
            <button class="btn-outline" onclick="reset()">
                <span>🔄</span> 重置
            </button>
        </div>

        <div class="info-box">
            <h3>💡 使用说明</h3>
            <p>
                • <span class="highlight">显示笔顺</span> - 自动演示汉字的书写顺序<br>
                • <span class="highlight">练习书写</span> - 跟着笔画顺序练习书写<br>
                • <span class="highlight">慢速演示</span> - 以较慢的速度演示笔顺<br>
                • 笔顺数据由 <a href="https://hanziwriter.org/" target="_blank">hanzi-writer</a> 提供
            </p>
        </div>
    </div>

    <script>
        const writer = HanziWriter.create('character-target', $char_js, {
            width: $width,
            height: $height,
            padding: $padding,
            showOutline: $show_outline,
            strokeAnimationSpeed: $stroke_animation_speed,
            delayBetweenStrokes: $delay_between_strokes,
            strokeColor: $stroke_color,
            radicalColor: $radical_color,
            outlineColor: $outline_color,
            drawingWidth: $drawing_width,
        });

        function getCurrentChar() {
            return $char_js;
        }

        function animateStroke() {
            writer.animateCharacter({
                onComplete: function() {
                    console.log('✅ 笔顺演示完成！');
                }
            });
        }

        function slowAnimate() {
            writer.animateCharacter({
                strokeAnimationSpeed: $slow_animation_speed,
                delayBetweenStrokes: $slow_delay_between_strokes,
                onComplete: function() {
                    console.log('✅ 慢速演示完成！');
                }
            });
        }

        function quizMode() {
            writer.quiz({
                strokeAnimationSpeed: $quiz_animation_speed,
                delayBetweenStrokes: $quiz_delay_between_strokes,
                onMistake: function(strokeData) {
                    console.log('❌ 笔画错误: ' + strokeData.strokeNum);
                },
                onCorrectStroke: function(strokeData) {
                    console.log('✅ 正确笔画: ' + strokeData.strokeNum);
                },
                onComplete: function(summaryData) {
                    console.log('📊 练习完成！');
                    console.log('   总笔画: ' + summaryData.totalStrokes);
                    console.log('   错误次数: ' + summaryData.mistakes);

                    if (summaryData.mistakes === 0) {
                        alert('🎉 太棒了！你完美写出了这个字！');
                    } else if (summaryData.mistakes < 3) {
                        alert('👍 不错！继续加油！错误 ' + summaryData.mistakes + ' 次');
                    } else {
                        alert('💪 多练习几次，你会越来越好的！');
                    }
                }
            });
        }

        function reset() {
            writer.setCharacter(getCurrentChar());
            console.log('🔄 已重置');
        }

        // autoplay once the page has settled
        setTimeout(function() {
            animateStroke();
        }, $autoplay_delay_ms);
    </script>
</body>
</html>
""")


def js_string(value: str) -> str:
    """Encode ``value`` as a JS string literal safe inside an inline <script>."""
    encoded = json.dumps(value, ensure_ascii=False)
    for ch, repl in _JS_UNSAFE.items():
        encoded = encoded.replace(ch, repl)
    return encoded


def _js_number(value) -> str:
    return json.dumps(value)


def generate_page(
    character: str,
    pinyin: str,
    config: Optional[PageConfig] = None,
    escape: bool = True,
) -> str:
    """Render the stroke-order page for ``character``.

    With ``escape`` (the default) both values are HTML-escaped in markup and
    the character is JSON-encoded for the script. ``escape=False`` puts them
    in verbatim, single-quoted in the script, so any quote or angle bracket in
    the input ends up in the document as-is.
    """
    config = config or PageConfig()

    if escape:
        char_html = html.escape(character)
        pinyin_html = html.escape(pinyin)
        char_js = js_string(character)
    else:
        char_html = character
        pinyin_html = pinyin
        char_js = f"'{character}'"

    return PAGE_TEMPLATE.substitute(
        char=char_html,
        pinyin=pinyin_html,
        char_js=char_js,
        cdn_url=html.escape(config.cdn_url),
        width=_js_number(config.width),
        height=_js_number(config.height),
        padding=_js_number(config.padding),
        show_outline="true" if config.show_outline else "false",
        stroke_animation_speed=_js_number(config.stroke_animation_speed),
        delay_between_strokes=_js_number(config.delay_between_strokes),
        stroke_color=js_string(config.stroke_color),
        radical_color=js_string(config.radical_color),
        outline_color=js_string(config.outline_color),
        drawing_width=_js_number(config.drawing_width),
        slow_animation_speed=_js_number(config.slow_animation_speed),
        slow_delay_between_strokes=_js_number(config.slow_delay_between_strokes),
        quiz_animation_speed=_js_number(config.quiz_animation_speed),
        quiz_delay_between_strokes=_js_number(config.quiz_delay_between_strokes),
        autoplay_delay_ms=_js_number(config.autoplay_delay_ms),
    )


def page_filename(character: str) -> str:
    return f"{character}.html"


def write_page(
    character: str,
    page: str,
    out_dir: Optional[Union[str, Path]] = None,
) -> Path:
    """Write ``page`` as ``<character>.html`` and return its absolute path.

    An existing file of the same name is overwritten.
    """
    target_dir = Path(out_dir) if out_dir is not None else Path.cwd()
    out_path = target_dir / page_filename(character)
    with open(out_path, "w", encoding="utf-8", newline="") as f:
        f.write(page)
    log_debug(f"wrote {len(page)} characters to {out_path}")
    return out_path.resolve()
