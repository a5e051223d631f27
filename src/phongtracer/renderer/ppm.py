# renderer/ppm.py
import os
from typing import Iterable, List

from phongtracer.renderer.canvas import Canvas
from phongtracer.renderer.tone_mapping import quantize

MAX_LINE_LENGTH = 70
MAX_COLOR_VALUE = 255


def _wrap(tokens: Iterable[str], limit: int = MAX_LINE_LENGTH) -> List[str]:
    lines = []
    line = ""
    for token in tokens:
        if not line:
            line = token
        elif len(line) + 1 + len(token) > limit:
            lines.append(line)
            line = token
        else:
            line += " " + token
    if line:
        lines.append(line)
    return lines


def canvas_to_ppm(canvas: Canvas) -> str:
    """
    Encodes the canvas as plain-text PPM (P3). Each pixel row starts a new
    line and no line is longer than 70 characters.
    """
    header = f"P3\n{canvas.width} {canvas.height}\n{MAX_COLOR_VALUE}"
    scaled = quantize(canvas.to_array(), MAX_COLOR_VALUE)
    lines = []
    for row in scaled:
        lines.extend(_wrap(str(value) for value in row.reshape(-1)))
    return header + "\n" + "\n".join(lines) + "\n"


def save(data: str, path: str):
    with open(path, "w") as f:
        f.write(data)


def save_canvas(canvas: Canvas, path: str):
    """
    Writes PPM text for a .ppm path and lets Pillow encode anything else.
    """
    if os.path.splitext(path)[1].lower() == ".ppm":
        save(canvas_to_ppm(canvas), path)
    else:
        canvas.save_image(path)
