# examples/triangles.py
from gjk2d import intersects

a = [(0.0, 0.0), (4.0, 0.0), (0.0, 4.0)]
b = [(1.0, 1.0), (5.0, 1.0), (1.0, 5.0)]
c = [(10.0, 10.0), (12.0, 10.0), (10.0, 12.0)]

print("a vs b:", intersects(a, b).name)
print("a vs c:", intersects(a, c).name)
print("a vs a:", intersects(a, a).name)
