import pytest
from hypothesis import given
from hypothesis import strategies as st

from algoritma.shapes import Accumulator, Motion, Rectangle, Shape, Triangle


def test_speed_of_source_example():
    assert Motion(17, 5).speed() == 3


def test_speed_truncates_toward_zero():
    assert Motion(-7, 2).speed() == -Motion(7, 2).speed()
    assert Motion(7, -2).speed() == -Motion(7, 2).speed()


def test_speed_zero_time_raises():
    with pytest.raises(ZeroDivisionError):
        Motion(10, 0).speed()


@given(st.integers(0, 10_000), st.integers(1, 100))
def test_speed_times_time_bounds_distance(distance, time):
    speed = Motion(distance, time).speed()
    assert speed * time <= distance < (speed + 1) * time


def test_accumulator_source_example():
    acc = Accumulator()
    acc.add(10)
    acc.add(12)
    assert acc.total == 22


def test_accumulator_starting_total():
    acc = Accumulator(5)
    assert acc.total == 5
    acc.add(-5)
    assert acc.total == 0


@given(st.integers(-100, 100), st.lists(st.integers(-1000, 1000)))
def test_accumulator_adds_all_numbers(start, numbers):
    acc = Accumulator(start)
    for number in numbers:
        acc.add(number)
    assert acc.total == start + sum(numbers)


def test_base_shape_area_is_zero():
    assert Shape(10, 4).area() == 0


def test_rectangle_source_example():
    assert Rectangle(10, 4).area() == 40


@given(st.integers(0, 1000), st.integers(0, 1000))
def test_triangle_is_half_rectangle(width, height):
    rect = Rectangle(width, height).area()
    tri = Triangle(width, height).area()
    assert tri == rect // 2
    assert 0 <= rect - 2 * tri <= 1


def test_polymorphic_dispatch():
    shapes = [Shape(12, 6), Rectangle(12, 6), Triangle(12, 6)]
    areas = [shape.area() for shape in shapes]
    assert areas[0] == 0
    assert areas[1] == 2 * areas[2]
    assert all(isinstance(shape, Shape) for shape in shapes)