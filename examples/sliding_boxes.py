# examples/sliding_boxes.py
import logging

from gjk2d import box

logging.basicConfig(level=logging.DEBUG, format="%(name)s %(levelname)s %(message)s")

fixed = box((0.0, 0.0), (0.5, 0.5))
moving = box((3.0, 0.0), (0.5, 0.5))

# Slide the second box left until it overlaps the first
for step in range(7):
    dx = -0.5 * step
    verdict = fixed.intersects(moving.translated((dx, 0.0)))
    print(f"dx={dx:5.2f}  {verdict.name}")
