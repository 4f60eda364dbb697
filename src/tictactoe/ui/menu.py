from __future__ import annotations

import logging
from typing import Callable, Optional, Tuple

from tictactoe.ai.base import Agent
from tictactoe.ai.hints import Suggester
from tictactoe.ai.minimax_agent import MinimaxAgent
from tictactoe.ai.search import SearchEngine
from tictactoe.config import MAX_DEPTH
from tictactoe.game.controller import run_game
from tictactoe.types import Player, other
from tictactoe.ui.human import HumanAgent
from tictactoe.ui.prompts import ask_choice

logger = logging.getLogger(__name__)

SIZE_MENU = """
===== Welcome to Tic Tac Toe =====
Select Board Size:
  1. 3x3 Board
  2. 4x4 Board
Enter your choice (1 or 2): """

OPPONENT_MENU = """
Choose Your Opponent:
  1. Play Against the Computer
  2. Play Against Another Player
  3. Computer vs Computer
  4. Exit Game
Enter your choice (1, 2, 3, or 4): """

SYMBOL_MENU = """
Choose Your Symbol:
  1. X
  2. O
Enter your choice (1 or 2): """


def build_players(
    opponent: int,
    symbol: Player,
    depth: int = MAX_DEPTH,
    input_fn: Callable[[str], str] = input,
) -> Tuple[Agent, Agent]:
    """
    Return (agent_x, agent_o) for an opponent choice:
    1 = human vs computer, 2 = human vs human, 3 = computer vs computer.
    """
    def computer(mark: Player) -> MinimaxAgent:
        return MinimaxAgent(mark=mark, name=f"Computer {mark}", engine=SearchEngine(max_depth=depth))

    def human(mark: Player) -> HumanAgent:
        return HumanAgent(mark=mark, suggester=Suggester(mark, SearchEngine(max_depth=depth)), input_fn=input_fn)

    if opponent == 1:
        you, cpu = human(symbol), computer(other(symbol))
        return (you, cpu) if symbol == "X" else (cpu, you)
    if opponent == 2:
        return human("X"), human("O")
    return computer("X"), computer("O")


def create_game(input_fn: Callable[[str], str] = input, depth: int = MAX_DEPTH) -> Optional[Tuple[Agent, Agent, int]]:
    size = 3 if ask_choice(SIZE_MENU, 2, input_fn) == 1 else 4

    opponent = ask_choice(OPPONENT_MENU, 4, input_fn)
    if opponent == 4:
        return None

    symbol: Player = "X"
    if opponent != 3:
        symbol = "X" if ask_choice(SYMBOL_MENU, 2, input_fn) == 1 else "O"

    agent_x, agent_o = build_players(opponent, symbol, depth=depth, input_fn=input_fn)
    logger.info("new game: %dx%d, X=%s, O=%s", size, size, agent_x.name, agent_o.name)
    return agent_x, agent_o, size


def run_menu(input_fn: Callable[[str], str] = input, depth: int = MAX_DEPTH, show_thinking: bool = True) -> None:
    while True:
        game = create_game(input_fn, depth=depth)
        if game is None:
            return

        agent_x, agent_o, size = game
        run_game(agent_x, agent_o, size, show_thinking=show_thinking)

        again = input_fn("Do you want to play again? (y - for yes/n - for no): ").strip().lower()
        if again != "y":
            return
