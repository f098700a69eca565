from dataclasses import dataclass

WIDTH, HEIGHT = 800, 600
PADDLE_W, PADDLE_H = 12, 100
BALL_RADIUS = 10
FPS = 60

BG = (26, 32, 44)
CENTER_LINE = (74, 85, 104)
TEXT = (226, 232, 240)
PLAYER_COLOR = (66, 153, 225)
AI_COLOR = (245, 101, 101)
BALL_COLOR = (247, 250, 252)

# ball tints after a paddle hit
PLAYER_HIT_TINT = (144, 205, 244)
AI_HIT_TINT = (254, 178, 178)

# full-surface flash after a point, RGBA
PLAYER_SCORED_FLASH = (66, 153, 225, 80)
AI_SCORED_FLASH = (245, 101, 101, 80)

POLICIES = ("lookahead", "legacy")


@dataclass
class Config:
    win_score: int = 5
    paddle_w: float = PADDLE_W
    paddle_h: float = PADDLE_H
    ball_radius: float = BALL_RADIUS

    initial_speed: float = 5.0
    launch_vy: float = 3.0
    max_speed: float = 15.0
    speedup: float = 1.1
    deflection: float = 0.2

    opponent_policy: str = "lookahead"
    lookahead: float = 10.0
    dead_zone: float = 10.0
    opponent_gain: float = 1.0
    legacy_dead_zone: float = 35.0
    legacy_step: float = 5.0

    hit_tint_secs: float = 0.1
    flash_secs: float = 0.3
    perturb_every: float = 10.0
    perturb_min: float = 0.5
    perturb_max: float = 1.5

    def __post_init__(self):
        if self.win_score < 1:
            raise ValueError(f"win_score must be >= 1, got {self.win_score}")
        for name in ("paddle_w", "paddle_h", "ball_radius", "initial_speed", "perturb_every",
                     "max_speed", "speedup", "deflection"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)}")
        for name in ("launch_vy", "lookahead", "dead_zone", "opponent_gain", "legacy_dead_zone",
                     "legacy_step", "hit_tint_secs", "flash_secs"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must not be negative, got {getattr(self, name)}")
        if not 0 < self.perturb_min <= self.perturb_max:
            raise ValueError(f"bad perturbation range [{self.perturb_min}, {self.perturb_max}]")
        if self.opponent_policy not in POLICIES:
            raise ValueError(f"unknown opponent policy {self.opponent_policy!r}")
