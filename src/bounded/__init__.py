"""
Bounded parameter values.

Числовые значения, которые всегда остаются в допустимом диапазоне:
clamp или wrap при каждом присваивании, статические (на уровне типа)
или динамические (в экземпляре) границы.
"""
