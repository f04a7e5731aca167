# planeshapes

Simple plane geometry with three mutable shapes, `Circle`, `Square` and
`Triangle`, built on an immutable `Point` type. Each shape reports its
measures, can be moved and resized in place, and gives the outline points
that trace it.

## Installation

```
pip install .
```

With the test dependencies:

```
pip install ".[test]"
```

## Points

`Point` is a frozen dataclass with `x` and `y`, both `0.0` by default.

```python
from planeshapes.point import Point

p = Point(3, 4)
p.distance()             # 5.0, distance to the origin
p.distance(Point(3, 0))  # 4.0
```

## Circles

`Circle(radius, center)`. The center defaults to the origin.

```python
from planeshapes.circle import Circle
from planeshapes.point import Point

c = Circle(10.0, Point(5.0, 3.0))
c.circumference()          # 2 * pi * 10
c.area()                   # pi * 100
c.translate(Point(4, -1))  # center moves by the offset, to (9, 2)
c.resize(0.5)              # radius becomes 5, the center stays put
c.equals(Circle(5.0, Point(9.0, 2.0)))  # True: radius and center within 1e-6
outline = c.points()       # 360 points, one per whole degree from 0 to 359
```

## Squares

`Square(a, c)` takes two opposite corners. The side length is the horizontal
distance between them, and the center is derived from the larger coordinates
and half the side.

```python
from planeshapes.square import Square
from planeshapes.point import Point

s = Square(Point(0, 0), Point(10, 10))
s.side(), s.perimeter(), s.area()  # 10.0, 40.0, 100.0
s.center()                         # Point(5.0, 5.0)
s.translate(Point(3, -2))          # both corners move by the offset
s.resize(2.0)                      # side 20, same center
s.rotate(90)                       # degrees, counterclockwise about the center
s.inscribed_circle()               # Circle with radius side / 2 at the center
s.circumscribed_circle()           # Circle with radius side * sqrt(2) / 2
s.equals(Square(Point(0, 0), Point(20, 20)))  # compares side lengths only, within 1e-6
closed_outline = s.points()        # 5 points: four corners, the first repeated
```

## Triangles

`Triangle(a, b, c)` takes three vertices.

```python
from planeshapes.triangle import Triangle
from planeshapes.point import Point

t = Triangle(Point(0, 0), Point(3, 0), Point(0, 4))
t.perimeter()  # 12.0
t.area()       # 6.0, signed: positive for counterclockwise vertices
t.center()     # centroid, Point(1.0, 4/3)
t.translate(Point(1, 2))  # vertex a moves to the target, b and c follow
t.resize(2.0)             # scaled about the centroid
t.points()                # [a, b, c, a]
```

## What it does not do

The package draws nothing: `points()` returns coordinates, and rendering
them on a screen is up to the caller. Triangles have no equality test, no
rotation, no right-angle, isosceles or equilateral checks, and no inscribed
or circumscribed circles.

## Running the tests

```
pytest
```