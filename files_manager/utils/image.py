from io import BytesIO

from PIL import Image


def make_thumbnail(data: bytes, width: int) -> bytes:
    """Resize image bytes to ``width`` pixels wide, keeping the aspect ratio.

    The output keeps the source format (PNG when Pillow can't tell). Same
    input always gives the same output.
    """
    with Image.open(BytesIO(data)) as img:
        fmt = img.format or 'PNG'
        height = max(1, round(img.height * width / img.width))
        resized = img.resize((width, height), Image.Resampling.LANCZOS)
        if fmt == 'JPEG' and resized.mode not in ('RGB', 'L'):
            resized = resized.convert('RGB')
        out = BytesIO()
        resized.save(out, format=fmt)
        return out.getvalue()


def rendition_path(path: str, width) -> str:
    return f"{path}_{width}"
