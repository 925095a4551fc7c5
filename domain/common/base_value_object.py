"""值对象基类"""

from dataclasses import dataclass


@dataclass(frozen=True)
class BaseValueObject:
    """
    值对象基类

    值对象不可变，通过属性值判断相等性。
    子类覆盖 validate() 实现自身的不变量校验，
    构造完成后自动调用。
    """

    def __post_init__(self) -> None:
        """初始化后验证"""
        self.validate()

    def validate(self) -> None:
        """验证值对象的有效性（子类可覆盖）"""
