"""Pinyin lookup and hanzi-writer stroke-order pages for Chinese characters."""

__version__ = "2.0.0"
