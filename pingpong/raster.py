import numpy as np

from .config import AI_COLOR, BG, CENTER_LINE, PLAYER_COLOR
from .state import Snapshot


def render_rgb(snap: Snapshot, scale=1):
    # Return an RGB image of the court
    W, H = int(snap.width), int(snap.height)
    img = np.zeros((H, W, 3), dtype=np.uint8)
    img[:] = BG
    for y in range(0, H, 20):  # center dashed line
        img[y:y+10, W//2-2:W//2+2] = CENTER_LINE
    # paddles
    pw = int(snap.paddle_w)
    y0 = max(0, int(snap.player_y)); img[y0:y0+int(snap.player_h), 0:pw] = PLAYER_COLOR
    y1 = max(0, int(snap.ai_y)); img[y1:y1+int(snap.ai_h), W-pw:W] = AI_COLOR
    # ball
    yy, xx = np.ogrid[:H, :W]
    mask = (xx - snap.ball_x) ** 2 + (yy - snap.ball_y) ** 2 <= snap.ball_radius ** 2
    img[mask] = snap.ball_color
    if snap.flash is not None:
        *rgb, a = snap.flash
        alpha = a / 255.0
        img = (img * (1 - alpha) + np.array(rgb) * alpha).astype(np.uint8)
    if scale != 1:
        img = np.repeat(np.repeat(img, scale, axis=0), scale, axis=1)
    return img
