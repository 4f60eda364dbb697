from __future__ import annotations

import logging
from contextlib import nullcontext
from typing import Literal, Optional

from tictactoe.ai.base import Agent
from tictactoe.config import DEFAULT_SIZE
from tictactoe.core.board import Board
from tictactoe.core.rules import check_winner_with_line
from tictactoe.game.state import GameState
from tictactoe.types import NO_MOVE, other
from tictactoe.ui.effects import thinking
from tictactoe.ui.human import HumanAgent
from tictactoe.ui.prompts import QuitRequested
from tictactoe.ui.render import render

logger = logging.getLogger(__name__)

Outcome = Literal["X", "O", "D"]


def _agent_name(agent: Agent, fallback: str) -> str:
    name = getattr(agent, "name", None)
    if not name:
        return fallback
    return str(name)


def _status_with_agents(status: str, agent_x: Agent, agent_o: Agent, current: str) -> str:
    """
    Prepend a persistent header showing who X and O are.
    """
    x_name = _agent_name(agent_x, "Player X")
    o_name = _agent_name(agent_o, "Player O")

    header = f"X: {x_name} | O: {o_name} | Turn: {current}"
    if status:
        return f"{header}\n{status}"
    return header


def run_game(
    agent_x: Agent,
    agent_o: Agent,
    size: int = DEFAULT_SIZE,
    *,
    show_thinking: bool = True,
    render_board: bool = True,
    state: Optional[GameState] = None,
) -> Optional[Outcome]:
    """
    Play one game. X always moves first.
    Returns the winning mark, "D" for a draw, or None if a human quit.
    """
    if state is None:
        state = GameState(board=Board(size), current="X", last_status="Player X starts.")

    def show(status: str, highlight=None) -> None:
        if render_board:
            render(state.board, _status_with_agents(status, agent_x, agent_o, state.current), highlight=highlight)

    while True:
        show(state.last_status)

        if state.board.has_winner():
            player, line = check_winner_with_line(state.board)  # type: ignore[misc]
            show(f"We have a winner! {player} wins!", highlight=line)
            logger.info("game over: %s wins on %dx%d", player, state.board.size, state.board.size)
            return player

        if state.board.is_full():
            show("It's a tie!")
            logger.info("game over: draw on %dx%d", state.board.size, state.board.size)
            return "D"

        current_agent = agent_x if state.current == "X" else agent_o

        pause = show_thinking and not isinstance(current_agent, HumanAgent)
        try:
            with thinking(_agent_name(current_agent, f"Player {state.current}")) if pause else nullcontext():
                move = current_agent.decide(state.board)
        except QuitRequested:
            show("Game quit.")
            logger.info("game quit by %s", state.current)
            return None

        if move == NO_MOVE:
            show("No moves left. It's a tie!")
            return "D"

        status = f"{_agent_name(current_agent, 'Player ' + state.current)} played {move.row + 1}, {move.col + 1}"
        info = getattr(current_agent, "last_info", None)
        if info:
            status += (
                f" | eval={info.get('score')} | "
                f"nodes={info.get('nodes')} | "
                f"cut={info.get('cutoffs')} | "
                f"{info.get('time_ms')}ms"
            )

        state.current = other(state.current)
        state.last_status = f"{status} | Next: Player {state.current}"
