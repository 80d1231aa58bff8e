from django.conf import settings
from io import BytesIO
from PIL import Image, ImageDraw, ImageFont

OG_WIDTH = 1200
OG_HEIGHT = 630

# Brand gradient endpoints (top to bottom)
GRADIENT_TOP = (234, 88, 12)
GRADIENT_BOTTOM = (124, 58, 237)

FONT_PATHS = [
    # macOS fonts
    "/System/Library/Fonts/Helvetica.ttc",
    # Linux fonts (Debian/Ubuntu)
    "/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf",
    "/usr/share/fonts/liberation/LiberationSans-Bold.ttf",
    # Docker Alpine fonts
    "/usr/share/fonts/liberation-fonts/LiberationSans-Bold.ttf",
]


def wrap_text(text, font, max_width, draw):
    """Wrap text to fit within max_width."""
    words = text.split()
    lines = []
    current_line = []

    for word in words:
        test_line = ' '.join(current_line + [word])
        bbox = draw.textbbox((0, 0), test_line, font=font)
        if bbox[2] - bbox[0] <= max_width:
            current_line.append(word)
        else:
            if current_line:
                lines.append(' '.join(current_line))
                current_line = [word]
            else:
                lines.append(word)

    if current_line:
        lines.append(' '.join(current_line))

    return lines


def _load_fonts():
    """Return (title, subtitle, brand) fonts, falling back to PIL's default."""
    for font_path in FONT_PATHS:
        try:
            return (
                ImageFont.truetype(font_path, 72),
                ImageFont.truetype(font_path, 40),
                ImageFont.truetype(font_path, 38),
            )
        except OSError:
            continue

    default = ImageFont.load_default()
    return default, default, default


def _draw_centered_lines(draw, lines, font, y, fill, spacing):
    for line in lines:
        bbox = draw.textbbox((0, 0), line, font=font)
        line_width = bbox[2] - bbox[0]
        line_height = bbox[3] - bbox[1]
        draw.text(((OG_WIDTH - line_width) // 2, y), line, fill=fill, font=font)
        y += line_height + spacing
    return y


def generate_og_image(title, subtitle=None):
    """
    Generate the Open Graph preview image for social shares.

    Args:
        title: Main title text
        subtitle: Optional subtitle text

    Returns:
        BytesIO object containing PNG image
    """
    img = Image.new('RGB', (OG_WIDTH, OG_HEIGHT))
    draw = ImageDraw.Draw(img)

    for y in range(OG_HEIGHT):
        ratio = y / OG_HEIGHT
        color = tuple(
            int(top + (bottom - top) * ratio)
            for top, bottom in zip(GRADIENT_TOP, GRADIENT_BOTTOM)
        )
        draw.rectangle([(0, y), (OG_WIDTH, y + 1)], fill=color)

    title_font, subtitle_font, brand_font = _load_fonts()

    # Rocket badge: rounded square with the brand name beside it
    logo_x, logo_y, logo_size = 60, 50, 60
    draw.rounded_rectangle(
        [logo_x, logo_y, logo_x + logo_size, logo_y + logo_size],
        radius=12,
        fill='white',
    )
    draw.polygon(
        [(logo_x + 30, logo_y + 10), (logo_x + 46, logo_y + 48), (logo_x + 14, logo_y + 48)],
        fill=GRADIENT_TOP,
    )
    draw.text((logo_x + logo_size + 15, logo_y + 10), settings.SITE_NAME, fill='white', font=brand_font)

    max_text_width = OG_WIDTH - 120  # 60px padding on each side

    current_y = _draw_centered_lines(
        draw, wrap_text(title, title_font, max_text_width, draw),
        title_font, 210, 'white', 20,
    )

    if subtitle:
        _draw_centered_lines(
            draw, wrap_text(subtitle, subtitle_font, max_text_width, draw),
            subtitle_font, current_y + 20, (255, 255, 255), 15,
        )

    tagline = "Coming Soon · Early Access Waitlist Open"
    tagline_bbox = draw.textbbox((0, 0), tagline, font=subtitle_font)
    tagline_width = tagline_bbox[2] - tagline_bbox[0]
    draw.text(((OG_WIDTH - tagline_width) // 2, OG_HEIGHT - 70), tagline, fill=(255, 255, 255), font=subtitle_font)

    buffer = BytesIO()
    img.save(buffer, format='PNG')
    buffer.seek(0)

    return buffer
