"""Internationalisation strings for the simplechess UI.

Usage::

    from simplechess.ui.i18n import t, set_language

    set_language("Hinglish")
    print(t().thinking)                 # "AI soch raha hai..."
    print(t().game_over_banner.format(color="WHITE"))
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Strings:
    # ── Main window ──────────────────────────────────────────────────────
    window_title: str
    mode_label_pvp: str
    mode_label_ai: str
    turn_label: str  # "Current Turn: {color}"
    thinking: str
    game_over_banner: str  # "Game Over! {color} Wins!"
    reason_king_captured: str
    reason_no_moves: str  # "{color} has no legal moves."
    status_engine_error: str  # "Engine error: {msg}"
    color_white: str
    color_black: str
    computer_name: str

    # ── Mode selection ───────────────────────────────────────────────────
    mode_prompt: str
    btn_pvp: str
    btn_ai: str
    modes_heading: str
    mode_pvp_desc: str
    mode_ai_desc: str

    # ── Captured tray ────────────────────────────────────────────────────
    captured_heading: str

    # ── Controls ─────────────────────────────────────────────────────────
    btn_change_mode: str
    btn_new_game: str

    # ── How to play ──────────────────────────────────────────────────────
    how_to_play_heading: str
    how_select: str
    how_move: str
    how_ai_side: str
    how_win: str


_EN = Strings(
    window_title="Chess Game",
    mode_label_pvp="2 Players Mode",
    mode_label_ai="Playing vs Computer",
    turn_label="Current Turn: {color}",
    thinking="AI is thinking...",
    game_over_banner="Game Over! {color} Wins!",
    reason_king_captured="The king was captured.",
    reason_no_moves="{color} has no legal moves.",
    status_engine_error="Engine error: {msg}",
    color_white="White",
    color_black="Black",
    computer_name="Computer",
    mode_prompt="How do you want to play?",
    btn_pvp="2 Players (Local)",
    btn_ai="vs Computer (AI)",
    modes_heading="Modes:",
    mode_pvp_desc="2 Players: two friends share one board",
    mode_ai_desc="vs Computer: practice against the AI",
    captured_heading="Captured",
    btn_change_mode="Change Mode",
    btn_new_game="New Game",
    how_to_play_heading="How to Play:",
    how_select="Click a piece to select it (green highlights show valid moves)",
    how_move="Click a highlighted square to move",
    how_ai_side="You are playing as {human} against the computer ({computer})",
    how_win="Capture the opponent's King to win!",
)

_HINGLISH = Strings(
    window_title="Chess Game",
    mode_label_pvp="2 Players Mode",
    mode_label_ai="Computer ke saath khel rahe ho",
    turn_label="Ab chaal: {color}",
    thinking="AI soch raha hai...",
    game_over_banner="Game Over! {color} jeet gaya!",
    reason_king_captured="Raja pakda gaya.",
    reason_no_moves="{color} ke paas koi chaal nahi bachi.",
    status_engine_error="Engine mein gadbad: {msg}",
    color_white="White",
    color_black="Black",
    computer_name="Computer",
    mode_prompt="Kaise khelna chahte ho?",
    btn_pvp="2 Players (Local)",
    btn_ai="vs Computer (AI)",
    modes_heading="Modes:",
    mode_pvp_desc="2 Players: Dono dost ek saath khelo",
    mode_ai_desc="vs Computer: AI ke against practice karo",
    captured_heading="Captured",
    btn_change_mode="Mode badlo",
    btn_new_game="Naya Game",
    how_to_play_heading="Kaise khelein:",
    how_select="Piece par click karo (hare nishaan sahi chaalein dikhate hain)",
    how_move="Hare nishaan wale square par click karke chalo",
    how_ai_side="Tum {human} ho, computer {computer} hai",
    how_win="Saamne wale ka Raja pakdo aur jeeto!",
)

_LOCALES: dict[str, Strings] = {
    "English": _EN,
    "Hinglish": _HINGLISH,
}

_current: Strings = _EN


def t() -> Strings:
    """Return the active string table."""
    return _current


def set_language(language: str) -> None:
    """Switch the active language; unknown names fall back to English."""
    global _current
    _current = _LOCALES.get(language, _EN)


def available_languages() -> list[str]:
    return list(_LOCALES)
