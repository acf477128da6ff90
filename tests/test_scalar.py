import math

import pytest
from mathcore.errors import DomainError
from mathcore.scalar import *
## unit tests for mathcore scalar.py


class TestCompare:
    """tolerance and kind queries"""

    def test_close(self):
        assert close(1 + 1j, 1 + 1j)
        assert close(1.0, 1.0 + 1e-13)
        assert not close(1.0, 1.0 + 1e-6)
        assert close(1.0, 1.001, eps=0.01)

    def test_kinds(self):
        assert is_real(3 + 0j)
        assert not is_real(3 + 1e-300j)
        assert is_integer(4 + 0j)
        assert not is_integer(4.5 + 0j)
        assert not is_integer(4 + 1j)
        assert not is_integer(complex(math.inf, 0))

    def test_machine_epsilon(self):
        assert MACHINE_EPSILON == 2.0 ** -52

    def test_to_complex(self):
        assert to_complex(2) == 2 + 0j
        with pytest.raises(TypeError):
            to_complex(True)


class TestArithmetic:

    def test_argument(self):
        assert close(argument(1j), math.pi / 2)
        assert close(argument(-1 + 0j), math.pi)

    def test_divide(self):
        assert divide(6 + 0j, 3 + 0j) == 2 + 0j
        assert close(divide(1j, 1 + 1j), 0.5 + 0.5j)
        with pytest.raises(DomainError):
            divide(1.0, 0j)

    def test_power(self):
        assert power(2, 10) == 1024 + 0j
        assert power(0, 0) == 1 + 0j
        assert power(5 + 5j, 0) == 1 + 0j
        assert power(0, 2) == 0j
        assert close(power(-1, 0.5), 1j)
        with pytest.raises(DomainError):
            power(0, -1)


class TestFormat:
    """culture-invariant text form"""

    def test_real(self):
        assert format_real(2.0) == '2'
        assert format_real(-0.0) == '0'
        assert format_real(0.1 + 0.2) == '0.3'
        assert format_real(1.0 / 3.0) == '0.333333333333333'
        assert format_real(1e-20) == '1e-20'
        assert format_real(math.inf) == 'Infinity'
        assert format_real(-math.inf) == '-Infinity'
        assert format_real(math.nan) == 'NaN'

    def test_complex(self):
        assert format_complex(0j) == '0'
        assert format_complex(3 + 0j) == '3'
        assert format_complex(2j) == '2i'
        assert format_complex(-2j) == '-2i'
        assert format_complex(1j) == 'i'
        assert format_complex(-1j) == '-i'
        assert format_complex(-1.84 + 0.4j) == '-1.84 + 0.4i'
        assert format_complex(7 - 17.2j) == '7 - 17.2i'
        assert format_complex(3 + 1j) == '3 + i'
        assert format_complex(complex(-0.0, -0.0)) == '0'
