"""
Core: башня точных числовых систем ℕ → ℤ → ℚ.

Все операции над ℕ выводятся из единственного примитива successor;
ℤ — замыкание ℕ по вычитанию, ℚ — замыкание ℤ по делению.
"""
