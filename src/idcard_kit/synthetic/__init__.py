"""
仿真数据合成模块

主要组件:
- FakeOptions: 生成约束
- FakeGenerator: 仿真身份证号生成器
"""

from idcard_kit.synthetic.fake import (
    FakeGenerator,
    FakeOptions,
    new_fake,
    random_fake,
)

__all__ = [
    "FakeGenerator",
    "FakeOptions",
    "new_fake",
    "random_fake",
]
