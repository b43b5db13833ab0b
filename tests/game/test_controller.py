"""Tests for GameController — the orchestrator."""

from simplechess.core.board import Board
from simplechess.core.enums import Color, PieceType
from simplechess.core.move import Move
from simplechess.core.outcome import GameEndReason, GameOutcome
from simplechess.core.piece import Piece
from simplechess.core.types import Square
from simplechess.game.controller import GameController
from simplechess.game.interfaces import GameMode, GamePhase
from simplechess.game.player import AIPlayer, HumanPlayer

QUEEN_TAKES_KING = """
    ....k...
    ........
    ........
    ........
    ....Q...
    ........
    ........
    ....K...
"""

WHITE_STUCK = """
    ....k...
    ........
    ........
    p.......
    P.......
    ........
    ........
    ........
"""

BLACK_STUCK_AFTER_WHITE = """
    ........
    ........
    ........
    p.......
    P.......
    ........
    ........
    ....K...
"""

WHITE_PAWN = Piece(Color.WHITE, PieceType.PAWN)
BLACK_PAWN = Piece(Color.BLACK, PieceType.PAWN)


def _make_hh_controller(board: Board | None = None) -> GameController:
    """Helper: human vs human game."""
    ctrl = GameController()
    ctrl.new_game(
        HumanPlayer(Color.WHITE, "W"),
        HumanPlayer(Color.BLACK, "B"),
        board=board,
    )
    return ctrl


class _Recorder:
    """Collects AIPlayer requests and cancellations."""

    def __init__(self) -> None:
        self.boards: list[Board] = []
        self.cancels = 0

    def request(self, board: Board) -> None:
        self.boards.append(board)

    def cancel(self) -> None:
        self.cancels += 1


def _make_ai_controller(recorder: _Recorder) -> GameController:
    ctrl = GameController()
    ctrl.new_game(
        HumanPlayer(Color.WHITE, "W"),
        AIPlayer(Color.BLACK, on_request_move=recorder.request, on_cancel=recorder.cancel),
        mode=GameMode.AI,
    )
    return ctrl


class TestNewGame:
    def test_phase_awaiting(self) -> None:
        ctrl = _make_hh_controller()
        assert ctrl.state.phase == GamePhase.AWAITING_MOVE
        assert ctrl.mode == GameMode.PVP

    def test_players_assigned(self) -> None:
        ctrl = _make_hh_controller()
        assert ctrl.player(Color.WHITE) is not None
        assert ctrl.player(Color.BLACK) is not None

    def test_current_player_is_white(self) -> None:
        ctrl = _make_hh_controller()
        cp = ctrl.current_player
        assert cp is not None and cp.color == Color.WHITE

    def test_no_selection(self) -> None:
        ctrl = _make_hh_controller()
        assert ctrl.selected_square is None
        assert ctrl.highlighted_squares == []

    def test_stuck_side_loses_immediately(self) -> None:
        outcomes: list[GameOutcome] = []
        ctrl = GameController()
        ctrl.events.on_game_over.append(outcomes.append)
        ctrl.new_game(
            HumanPlayer(Color.WHITE),
            HumanPlayer(Color.BLACK),
            board=Board.from_diagram(WHITE_STUCK),
        )
        assert ctrl.state.is_game_over
        assert outcomes == [GameOutcome(Color.BLACK, GameEndReason.NO_LEGAL_MOVES)]

    def test_new_game_cancels_pending_computer(self) -> None:
        recorder = _Recorder()
        ctrl = _make_ai_controller(recorder)
        ctrl.new_game(HumanPlayer(Color.WHITE), HumanPlayer(Color.BLACK))
        assert recorder.cancels == 1
        assert ctrl.mode == GameMode.PVP

    def test_new_game_discards_old_board(self) -> None:
        ctrl = _make_hh_controller()
        ctrl.submit_move(Move((6, 4), (4, 4), WHITE_PAWN))
        ctrl.new_game(HumanPlayer(Color.WHITE), HumanPlayer(Color.BLACK))
        assert ctrl.state.board == Board.initial()
        assert ctrl.state.ply_count == 0


class TestSubmitMove:
    def test_legal_move_accepted(self) -> None:
        ctrl = _make_hh_controller()
        ok = ctrl.submit_move(Move((6, 4), (4, 4), WHITE_PAWN))
        assert ok
        assert ctrl.state.side_to_move == Color.BLACK

    def test_illegal_move_rejected(self) -> None:
        ctrl = _make_hh_controller()
        ok = ctrl.submit_move(Move((6, 4), (3, 4), WHITE_PAWN))
        assert not ok
        assert ctrl.state.side_to_move == Color.WHITE
        assert ctrl.state.board == Board.initial()

    def test_wrong_side_rejected(self) -> None:
        ctrl = _make_hh_controller()
        assert not ctrl.submit_move(Move((1, 4), (3, 4), BLACK_PAWN))

    def test_move_event_fires(self) -> None:
        ctrl = _make_hh_controller()
        events: list[str] = []
        ctrl.events.on_move.append(lambda rec, st: events.append(str(rec.move)))
        ctrl.submit_move(Move((6, 4), (4, 4), WHITE_PAWN))
        assert events == ["e2e4"]

    def test_king_capture_ends_game(self) -> None:
        ctrl = _make_hh_controller(Board.from_diagram(QUEEN_TAKES_KING))
        outcomes: list[GameOutcome] = []
        phases: list[GamePhase] = []
        ctrl.events.on_game_over.append(outcomes.append)
        ctrl.events.on_phase_changed.append(phases.append)

        queen = Piece(Color.WHITE, PieceType.QUEEN)
        assert ctrl.submit_move(Move((4, 4), (0, 4), queen))

        assert outcomes == [GameOutcome(Color.WHITE, GameEndReason.KING_CAPTURED)]
        assert phases == [GamePhase.GAME_OVER]
        assert ctrl.state.board[(0, 4)] == queen

    def test_no_moves_after_game_over(self) -> None:
        ctrl = _make_hh_controller(Board.from_diagram(QUEEN_TAKES_KING))
        ctrl.submit_move(Move((4, 4), (0, 4), Piece(Color.WHITE, PieceType.QUEEN)))
        king = Piece(Color.BLACK, PieceType.KING)
        assert not ctrl.submit_move(Move((0, 4), (0, 3), king))

    def test_opponent_without_moves_loses(self) -> None:
        ctrl = _make_hh_controller(Board.from_diagram(BLACK_STUCK_AFTER_WHITE))
        king = Piece(Color.WHITE, PieceType.KING)
        assert ctrl.submit_move(Move((7, 4), (7, 3), king))
        assert ctrl.state.is_game_over
        assert ctrl.state.winner == Color.WHITE
        assert ctrl.state.outcome.reason == GameEndReason.NO_LEGAL_MOVES


class TestClickSquare:
    def test_select_own_piece(self) -> None:
        ctrl = _make_hh_controller()
        assert not ctrl.click_square((6, 4))
        assert ctrl.selected_square == (6, 4)
        assert ctrl.highlighted_squares == [(4, 4), (5, 4)]

    def test_click_highlighted_moves(self) -> None:
        ctrl = _make_hh_controller()
        ctrl.click_square((6, 4))
        assert ctrl.click_square((4, 4))
        assert ctrl.state.board[(4, 4)] == WHITE_PAWN
        assert ctrl.selected_square is None
        assert ctrl.highlighted_squares == []

    def test_click_opponent_piece_clears(self) -> None:
        ctrl = _make_hh_controller()
        ctrl.click_square((6, 4))
        assert not ctrl.click_square((1, 4))
        assert ctrl.selected_square is None

    def test_click_unreachable_empty_square_clears(self) -> None:
        ctrl = _make_hh_controller()
        ctrl.click_square((6, 4))
        assert not ctrl.click_square((3, 0))
        assert ctrl.selected_square is None
        assert ctrl.state.side_to_move == Color.WHITE

    def test_click_other_own_piece_reselects(self) -> None:
        ctrl = _make_hh_controller()
        ctrl.click_square((6, 4))
        ctrl.click_square((7, 6))
        assert ctrl.selected_square == (7, 6)
        assert ctrl.highlighted_squares == [(5, 5), (5, 7)]

    def test_piece_without_moves_selectable(self) -> None:
        ctrl = _make_hh_controller()
        ctrl.click_square((7, 0))
        assert ctrl.selected_square == (7, 0)
        assert ctrl.highlighted_squares == []

    def test_turns_alternate(self) -> None:
        ctrl = _make_hh_controller()
        ctrl.click_square((6, 4))
        ctrl.click_square((4, 4))
        ctrl.click_square((6, 3))
        assert ctrl.selected_square is None
        ctrl.click_square((1, 4))
        assert ctrl.selected_square == (1, 4)

    def test_selection_event(self) -> None:
        ctrl = _make_hh_controller()
        seen: list[tuple[Square | None, list[Square]]] = []
        ctrl.events.on_selection_changed.append(lambda sq, t: seen.append((sq, t)))
        ctrl.click_square((6, 4))
        ctrl.clear_selection()
        assert seen == [((6, 4), [(4, 4), (5, 4)]), (None, [])]

    def test_ignored_after_game_over(self) -> None:
        ctrl = _make_hh_controller(Board.from_diagram(QUEEN_TAKES_KING))
        ctrl.submit_move(Move((4, 4), (0, 4), Piece(Color.WHITE, PieceType.QUEEN)))
        ctrl.click_square((7, 4))
        assert ctrl.selected_square is None


class TestComputerOpponent:
    def test_human_move_prompts_computer(self) -> None:
        recorder = _Recorder()
        ctrl = _make_ai_controller(recorder)
        phases: list[GamePhase] = []
        ctrl.events.on_phase_changed.append(phases.append)

        ctrl.click_square((6, 4))
        ctrl.click_square((4, 4))

        assert ctrl.state.phase == GamePhase.THINKING
        assert phases == [GamePhase.THINKING]
        assert recorder.boards == [ctrl.state.board]

    def test_clicks_ignored_while_computer_to_move(self) -> None:
        recorder = _Recorder()
        ctrl = _make_ai_controller(recorder)
        ctrl.submit_move(Move((6, 4), (4, 4), WHITE_PAWN))
        assert not ctrl.click_square((1, 4))
        assert ctrl.selected_square is None

    def test_computer_move_returns_turn(self) -> None:
        recorder = _Recorder()
        ctrl = _make_ai_controller(recorder)
        ctrl.submit_move(Move((6, 4), (4, 4), WHITE_PAWN))
        assert ctrl.submit_move(Move((1, 4), (3, 4), BLACK_PAWN))
        assert ctrl.state.phase == GamePhase.AWAITING_MOVE
        assert ctrl.state.side_to_move == Color.WHITE
        assert len(recorder.boards) == 1

    def test_declare_no_moves(self) -> None:
        recorder = _Recorder()
        ctrl = _make_ai_controller(recorder)
        ctrl.submit_move(Move((6, 4), (4, 4), WHITE_PAWN))
        ctrl.declare_no_moves()
        assert ctrl.state.winner == Color.WHITE
        ctrl.declare_no_moves()
        assert ctrl.state.winner == Color.WHITE
