import os, sys
ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)
from cycloid.scene_builder import CycloidScene
from cycloid.host import format_area_report, parse_radius

radius = parse_radius(sys.argv[1] if len(sys.argv) > 1 else "50")

scene = CycloidScene()
scene.start(radius)

w, h = 800, 600
trail_counts = []
glow_peak = 0.0
for frame in range(600):
    result = scene.step(w, h)
    trail_counts.append(len(scene.animation.trail))
    glow_peak = max(glow_peak, result.glow_alpha)

print(format_area_report(radius))
print('Total frames:', len(trail_counts))
print('Frame of completion:', next((i + 1 for i, c in enumerate(trail_counts) if c == trail_counts[-1]), None))
print('Final trail length:', trail_counts[-1])
print('Glow peak alpha:', round(glow_peak, 3))
print('Final snapshot:', scene.snapshot())
print('Last frame roles:', result.roles)
