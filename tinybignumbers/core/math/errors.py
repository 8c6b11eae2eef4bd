"""
Arithmetic Errors — исключения целочисленной арифметики

Таксономия ошибок:
- DivideByZero: делитель равен нулю (Int128 и FixedPoint56Q8)
- ArithmeticOverflow: значение не помещается в signed 64-bit при точном
  сужающем преобразовании (Int128.to_long_exact)

Все остальные операции (add, multiply, shift) переполняются молча
(wrap по модулю 2^N) и эти исключения НЕ выбрасывают.
"""


class DivideByZero(ZeroDivisionError):
    """
    Деление на ноль.

    Фатально для операции, всегда пробрасывается вызывающему коду.
    Наследуется от ZeroDivisionError, поэтому ловится и стандартным
    обработчиком Python.
    """

    pass


class ArithmeticOverflow(OverflowError):
    """
    Значение не помещается в целевой тип при точном преобразовании.

    Выбрасывается только из to_long_exact(): старший limb содержит значимые
    биты, либо знаковый бит младшего limb не совпадает с расширением знака.
    """

    pass
