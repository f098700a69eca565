# dashboard.py
import logging
from typing import List

import matplotlib.pyplot as plt
import numpy as np
import streamlit as st

from pingpong import Config, Phase, Simulation
from pingpong.config import FPS, HEIGHT, WIDTH
from pingpong.raster import render_rgb

logging.basicConfig(level=logging.INFO)

# -----------------------------
# Autopilot standing in for the mouse
# -----------------------------
class Autopilot:
    def __init__(self, skill=0.8, seed=None):
        self.skill = skill
        self.rng = np.random.default_rng(seed)
        self.y = HEIGHT / 2

    def pointer(self, snap):
        # Drift toward the ball with a lag and some jitter; lower skill = sloppier
        self.y += (snap.ball_y - self.y) * self.skill * 0.3
        return self.y + self.rng.normal(0, (1 - self.skill) * 40)

# -----------------------------
# Headless match runner
# -----------------------------
class Match:
    def __init__(self, cfg: Config, skill: float, seed=None):
        self.cfg = cfg
        self.sim = Simulation(lambda: (WIDTH, HEIGHT), cfg=cfg, seed=seed)
        self.pilot = Autopilot(skill, seed)
        self.frame = 0
        self.speeds: List[float] = []
        self.player_scores: List[int] = []
        self.ai_scores: List[int] = []

    @property
    def now(self):
        return self.frame / FPS

    def step(self):
        snap = self.sim.snapshot(self.now)
        if snap.phase is not Phase.PLAYING:
            self.sim.activate(self.now)
            return
        self.sim.set_pointer(self.pilot.pointer(snap))
        self.sim.tick(self.now)
        self.frame += 1
        ball = self.sim.world.ball
        self.speeds.append(ball.speed)
        self.player_scores.append(self.sim.world.score.player)
        self.ai_scores.append(self.sim.world.score.ai)

# -----------------------------
# Streamlit App
# -----------------------------
st.set_page_config(layout="wide", page_title="Ping Pong vs AI — Headless Viewer")
st.title("Ping Pong vs AI — Headless Match Viewer")

st.sidebar.header("Match")
seed = st.sidebar.number_input("Seed", 0, 10_000, value=0, step=1)
win_score = st.sidebar.slider("Win score", 1, 15, value=5)
legacy = st.sidebar.checkbox("Legacy AI (chase ball)", value=False)
skill = st.sidebar.slider("Autopilot skill", 0.1, 1.0, value=0.8, step=0.05)
new_match = st.sidebar.button("⟲ New match")

cfg = Config(win_score=win_score, opponent_policy="legacy" if legacy else "lookahead")
if "match" not in st.session_state or new_match:
    st.session_state.match = Match(cfg, skill, seed=int(seed))
match = st.session_state.match

left, right = st.columns([1, 1])

with left:
    st.subheader("Court")
    steps = st.slider("Ticks per refresh", 1, 600, 60, 1)
    st.button("▶ Advance")
    for _ in range(steps):
        match.step()
    snap = match.sim.snapshot(match.now)
    st.image(render_rgb(snap), channels="RGB",
             caption=f"{snap.phase.value} • tick {match.sim.ticks} • t={match.now:.1f}s")

with right:
    st.subheader("Match Metrics")
    m1, m2, m3 = st.columns(3)
    m1.metric("Player", snap.player_score)
    m2.metric("AI", snap.ai_score)
    m3.metric("Ball speed", f"{match.speeds[-1] if match.speeds else 0.0:.2f}")
    if snap.winner:
        st.success(f"Game over — {snap.winner} wins")

    c1, c2 = st.columns(2)
    with c1:
        st.caption("Ball speed per tick")
        fig1, ax1 = plt.subplots()
        ax1.plot(match.speeds)
        ax1.axhline(match.cfg.max_speed, color="gray", linestyle="--")
        ax1.set_xlabel("Tick"); ax1.set_ylabel("Speed")
        st.pyplot(fig1, clear_figure=True)
    with c2:
        st.caption("Score")
        fig2, ax2 = plt.subplots()
        ax2.plot(match.player_scores, label="player")
        ax2.plot(match.ai_scores, label="ai")
        ax2.set_xlabel("Tick"); ax2.legend()
        st.pyplot(fig2, clear_figure=True)

    st.markdown("### Sizes")
    st.write({"ball radius": round(snap.ball_radius, 2),
              "player paddle": round(snap.player_h, 2),
              "ai paddle": round(snap.ai_h, 2)})

st.caption("The left paddle is driven by an autopilot pointer. Adjust ticks per refresh and press ▶ Advance.")
