# ======================== KARTU LOGIN SISWA ========================
# Kartu berisi QR code username siswa, dengan nama dan username di bawahnya.

import io

import qrcode
from PIL import Image, ImageDraw, ImageFont


def _muat_font(ukuran):
    try:
        return ImageFont.truetype("arial.ttf", ukuran)
    except IOError:
        # Jika 'arial.ttf' tidak ditemukan, gunakan font default
        return ImageFont.load_default()


def create_login_card(username, nama):
    """
    Membuat QR code dari username dan menambahkan nama & username di bawahnya.
    """
    qr_img = qrcode.make(username).convert("RGB")
    qr_width, qr_height = qr_img.size

    # Tambahan ruang untuk dua baris teks
    final_width = max(qr_width, 300)
    final_height = qr_height + 80

    kartu = Image.new("RGB", (final_width, final_height), "white")
    kartu.paste(qr_img, ((final_width - qr_width) // 2, 0))

    draw = ImageDraw.Draw(kartu)
    y = qr_height + 5
    for teks, font in ((nama, _muat_font(24)), (username, _muat_font(20))):
        bbox = draw.textbbox((0, 0), teks, font=font)
        lebar = bbox[2] - bbox[0]
        draw.text(((final_width - lebar) // 2, y), teks, font=font, fill="black")
        y += 25

    return kartu


def card_png(username, nama):
    img_io = io.BytesIO()
    create_login_card(username, nama).save(img_io, 'PNG')
    img_io.seek(0)
    return img_io
