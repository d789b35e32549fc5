# svg.py
# simple SVG writer for extracted contours

from .selection import as_points


def path_d(points):
    if not points: return ""
    d = f"M {points[0][0]} {points[0][1]}"
    for x, y in points[1:]: d += f" L {x} {y}"
    return d + " Z"


def svg_text(contours, size, stroke="red"):
    w, h = size
    parts = [f'<svg xmlns="http://www.w3.org/2000/svg" width="{w}" height="{h}" viewBox="0 0 {w} {h}">',
             f'<g fill="none" stroke="{stroke}" stroke-width="1">']
    for c in contours:
        parts.append(f'<path d="{path_d(as_points(c))}" />')
    parts.append('</g></svg>')
    return "\n".join(parts)


def write_svg(contours, size, out_path, stroke="red"):
    with open(out_path, 'w') as f: f.write(svg_text(contours, size, stroke))
