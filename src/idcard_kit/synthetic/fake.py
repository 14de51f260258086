"""
仿真身份证号生成器

按给定约束（地区、出生年份范围、性别）生成能通过校验的 18 位大陆身份证号，
用于测试和构造样例数据。

注意：生成的号码仅供测试使用，不具备任何法律效力。

特性:
- 地区码、出生日期、性别严格遵守约束
- 顺序码随机，末位奇偶与性别一致
- 正确的校验码
- 可指定种子以获得可重复的结果
"""

import random
import threading
from dataclasses import dataclass, replace
from datetime import date, timedelta
from typing import Callable, Optional, Union

from idcard_kit.core.checksum import cn_check_symbol, is_ascii_digits
from idcard_kit.core.errors import GenerationConstraintError
from idcard_kit.core.fields import Gender
from idcard_kit.logging.setup import get_logger
from idcard_kit.regions.registry import RegionRegistry, get_default_registry


logger = get_logger(__name__)

# 默认出生年份跨度
DEFAULT_YEAR_SPAN = 100

# 最早允许的出生年份
MIN_SUPPORTED_YEAR = 1800

_thread_state = threading.local()


def _thread_rng() -> random.Random:
    """每个线程独立的随机数生成器"""
    rng = getattr(_thread_state, "rng", None)
    if rng is None:
        rng = random.Random()
        _thread_state.rng = rng
    return rng


@dataclass(frozen=True)
class FakeOptions:
    """仿真身份证号生成选项

    所有字段均可选，仅在生成时校验。

    Attributes:
        region: 地区码或其前缀（1-6 位数字）
        min_year: 最早出生年份（min_year <= max_year <= 当前年份）
        max_year: 最晚出生年份
        gender: 性别

    Example:
        >>> opts = FakeOptions().with_region("3301").with_years(1990, 2000)
        >>> opts.min_year, opts.max_year
        (1990, 2000)
    """

    region: Optional[str] = None
    min_year: Optional[int] = None
    max_year: Optional[int] = None
    gender: Optional[Gender] = None

    def with_region(self, code: str) -> "FakeOptions":
        return replace(self, region=code)

    def with_min_year(self, year: int) -> "FakeOptions":
        return replace(self, min_year=year)

    def with_max_year(self, year: int) -> "FakeOptions":
        return replace(self, max_year=year)

    def with_years(self, min_year: int, max_year: int) -> "FakeOptions":
        return replace(self, min_year=min_year, max_year=max_year)

    def with_gender(self, gender: Union[Gender, str]) -> "FakeOptions":
        return replace(self, gender=Gender(gender))


class FakeGenerator:
    """仿真身份证号生成器

    未指定种子时使用线程本地的随机数生成器；指定种子时使用独立的生成器，
    同一种子总是产生相同的序列（该实例不应跨线程共享）。

    Example:
        >>> gen = FakeGenerator(seed=7)
        >>> number = gen.random(FakeOptions(region="11", gender=Gender.FEMALE))
        >>> number[:2], int(number[16]) % 2
        ('11', 0)
    """

    def __init__(
        self,
        *,
        registry: Optional[RegionRegistry] = None,
        seed: Optional[int] = None,
        clock: Callable[[], date] = date.today,
    ):
        """初始化生成器

        Args:
            registry: 地区码表，默认使用全局表
            seed: 随机种子（用于可重复生成）
            clock: 返回当前日期的函数
        """
        self.registry = registry
        self.seed = seed
        self.clock = clock
        self._rng = random.Random(seed) if seed is not None else None

    @property
    def rng(self) -> random.Random:
        return self._rng or _thread_rng()

    def new(
        self,
        region: str,
        year: int,
        month: int,
        day: int,
        gender: Union[Gender, str],
    ) -> str:
        """按指定地区、出生日期和性别生成身份证号

        Args:
            region: 6 位地区码（不校验是否存在于地区码表）
            year: 出生年
            month: 出生月
            day: 出生日
            gender: 性别

        Returns:
            18 位身份证号

        Raises:
            GenerationConstraintError: 地区码不是 6 位数字、日期不存在或性别无效
        """
        if not isinstance(region, str) or len(region) != 6 or not is_ascii_digits(region):
            raise GenerationConstraintError("The length of region code must be 6 digits")

        try:
            birth = date(year, month, day)
        except (TypeError, ValueError) as e:
            raise GenerationConstraintError(f"Invalid date of birth: {e}") from e

        try:
            gender = Gender(gender)
        except ValueError as e:
            raise GenerationConstraintError(f"Invalid gender: {gender!r}") from e

        # 顺序码末位：奇数为男，偶数为女
        seq = self.rng.randrange(0, 999)
        if (gender is Gender.MALE) != (seq % 2 == 1):
            seq += 1

        first17 = f"{region}{birth.year:04d}{birth.month:02d}{birth.day:02d}{seq:03d}"
        return first17 + cn_check_symbol(first17)

    def random(self, options: Optional[FakeOptions] = None) -> str:
        """按约束随机生成身份证号

        Args:
            options: 生成选项，默认无约束

        Returns:
            18 位身份证号

        Raises:
            GenerationConstraintError: 年份范围不合法或地区码无效
        """
        options = options or FakeOptions()
        today = self.clock()
        current = today.year

        min_year, max_year = self._year_range(options, current)
        region_code = self._region_code(options.region)

        rng = self.rng
        min_age = max(0, current - max_year)
        max_age = current - min_year
        age = min_age if min_age == max_age else rng.randint(min_age, max_age)

        birth_year = current - age
        start = date(birth_year, 1, 1)
        end = today if birth_year == current else date(birth_year, 12, 31)
        birth = start + timedelta(days=rng.randint(0, (end - start).days))

        gender = options.gender or rng.choice((Gender.MALE, Gender.FEMALE))

        logger.debug(
            "Fake ID generated",
            extra={"event": "fake_generated", "region": region_code, "birth_year": birth_year},
        )
        return self.new(region_code, birth.year, birth.month, birth.day, gender)

    def _year_range(self, options: FakeOptions, current: int) -> tuple[int, int]:
        """校验并补全出生年份范围"""
        if options.max_year is not None and options.max_year > current:
            raise GenerationConstraintError(f"Max year must be less than or equal to {current}")

        if options.min_year is not None and options.min_year > current:
            raise GenerationConstraintError(f"Min year must be less than or equal to {current}")

        if options.min_year is not None and options.max_year is not None and options.max_year < options.min_year:
            raise GenerationConstraintError("Max year must be greater than or equal to min year")

        max_year = options.max_year if options.max_year is not None else current
        if options.min_year is not None:
            min_year = options.min_year
        else:
            min_year = min(current - DEFAULT_YEAR_SPAN, max_year)

        if min_year < MIN_SUPPORTED_YEAR:
            raise GenerationConstraintError(f"Min year must be greater than or equal to {MIN_SUPPORTED_YEAR}")

        return min_year, max_year

    def _region_code(self, region: Optional[str]) -> str:
        """按前缀选取地区码，未指定时随机选取"""
        registry = self.registry if self.registry is not None else get_default_registry()

        if region is None:
            try:
                return registry.random_code(self.rng)
            except LookupError as e:
                raise GenerationConstraintError(str(e)) from e

        code = registry.random_code_with_prefix(region, self.rng)
        if code is None:
            raise GenerationConstraintError(f"Invalid region code: {region!r}")
        return code


_default_generator = FakeGenerator()


def new_fake(region: str, year: int, month: int, day: int, gender: Union[Gender, str]) -> str:
    """按指定字段生成身份证号，见 FakeGenerator.new"""
    return _default_generator.new(region, year, month, day, gender)


def random_fake(options: Optional[FakeOptions] = None) -> str:
    """按约束随机生成身份证号，见 FakeGenerator.random"""
    return _default_generator.random(options)
