"""CLI for playing connect-N against a human or the heuristic agent."""

from __future__ import annotations

import logging
from typing import Callable, Optional

import tyro

from connectn.agents import HeuristicAgent
from connectn.config import AppConfig, load_config
from connectn.exceptions import CorruptStateError
from connectn.games.connectn import BoardState, GameConfig, other_player
from connectn.session import GameSession, Outcome, SessionPhase
from connectn.utils import save_exists

from .render import player_symbol, render_board

InputFn = Callable[[str], str]
PrintFn = Callable[..., None]

START_COMMANDS = (
    "COMMANDS:\n"
    "0 Change Game Settings\n"
    "1 Load Game\n"
    "2 Play Against NPC\n"
    "3 Play Against Human"
)
IN_GAME_COMMANDS = "COMMANDS:\n0 Return to Game\n1 New Game\n2 Save Game\n3 Surrender\n4 Quit"
SETTINGS_INVALID = (
    "The number of pieces to connect must be larger than 1, and the dimensions of the "
    "board must be larger or equal to the number of pieces to connect, please try again."
)


def _read_int(prompt: str, input_fn: InputFn, print_fn: PrintFn) -> int:
    while True:
        try:
            return int(input_fn(prompt))
        except ValueError:
            print_fn("Please enter a valid number!")


def _read_command(num_commands: int, prompt: str, input_fn: InputFn, print_fn: PrintFn) -> int:
    command = _read_int(prompt, input_fn, print_fn)
    while not 0 <= command < num_commands:
        print_fn(
            f"{command} is not a valid command, "
            f"please enter a command between 0 and {num_commands - 1}."
        )
        command = _read_int(prompt, input_fn, print_fn)
    return command


def _settings_message(config: GameConfig) -> str:
    return (
        f"[GAME SETTINGS: Board size = {config.rows} * {config.cols}, "
        f"Connect {config.win_con} to win]"
    )


def _outcome_message(outcome: Outcome, win_con: int) -> str:
    winner = outcome.winner
    if outcome.reason == "surrender":
        loser = other_player(winner)
        return f"Player {loser} ({player_symbol(loser)}) has surrendered. Player {winner} wins!"
    if outcome.reason == "win":
        return f"Player {winner} ({player_symbol(winner)}) wins by achieving connect {win_con}!"
    return "The board is now full, there are no more valid moves to be made, it is a draw."


def run_session(
    session: GameSession,
    agent: HeuristicAgent,
    save_path: str,
    input_fn: InputFn = input,
    print_fn: PrintFn = print,
) -> None:
    """
    Console loop over the session phases until the user quits.

    New games and loads are phase transitions inside this one loop, so a
    long chain of games never nests calls.
    """
    board = session.board
    pending = board.config

    while True:
        phase = session.phase

        if phase is SessionPhase.CONFIGURING:
            print_fn(_settings_message(pending))
            print_fn(START_COMMANDS)
            command = _read_command(4, "Command: ", input_fn, print_fn)

            if command == 0:
                candidate = GameConfig(
                    rows=_read_int("New number of rows: ", input_fn, print_fn),
                    cols=_read_int("New number of columns: ", input_fn, print_fn),
                    win_con=_read_int("New number of pieces to connect: ", input_fn, print_fn),
                )
                if candidate.is_valid():
                    pending = candidate
                else:
                    print_fn(SETTINGS_INVALID)

            elif command == 1:
                if not save_exists(save_path):
                    print_fn("Save not found, make sure you have saved a game.")
                    continue
                # Loaded games continue human vs human.
                session.agent = None
                try:
                    result = session.load(save_path)
                except CorruptStateError as exc:
                    print_fn(f"Could not load the saved game: {exc}")
                    continue
                print_fn(_settings_message(board.config))
                for player, column in result.moves:
                    print_fn(f"Player {player}: {column + 1}")

            else:
                session.agent = agent if command == 2 else None
                result = session.configure(pending.rows, pending.cols, pending.win_con)
                assert result is not None
                print_fn("---- NEW GAME STARTED ----")
                for player, column in result.moves:
                    print_fn(f"Player {player}: {column + 1}")

        elif phase is SessionPhase.AWAITING_MOVE:
            print_fn(render_board(board))
            print_fn(
                f"Please enter a valid free column number between 1 and {board.cols}. "
                "(Enter 0 to open the commands list.)"
            )
            prompt = f"Player {board.active_player} ({player_symbol(board.active_player)}): "
            move = _read_int(prompt, input_fn, print_fn)

            if move == 0:
                print_fn(IN_GAME_COMMANDS)
                command = _read_command(5, prompt, input_fn, print_fn)
                if command == 1:
                    session.new_game()
                    pending = board.config
                elif command == 2:
                    session.save(save_path)
                    print_fn("Game Saved.")
                elif command == 3:
                    session.surrender()
                elif command == 4:
                    return
                continue

            result = session.play(move - 1)
            if not result.accepted:
                print_fn(
                    f"{move} is not a valid free column number between 1 and {board.cols}, "
                    "please try again."
                )
                continue
            for player, column in result.moves[1:]:
                print_fn(f"Player {player}: {column + 1}")

        else:
            print_fn(render_board(board))
            print_fn(_outcome_message(session.outcome, board.win_con))
            answer = _read_int(
                "Enter 0 to start a new game or any other integer to quit: ", input_fn, print_fn
            )
            if answer != 0:
                return
            session.new_game()
            pending = board.config


def play_human_vs_agent(
    config: Optional[str] = None,
    rows: Optional[int] = None,
    cols: Optional[int] = None,
    win_con: Optional[int] = None,
    agent_player: Optional[int] = None,
    save_path: Optional[str] = None,
    log_level: str = "WARNING",
) -> None:
    """
    Play connect-N in the console.

    Args:
        config: Optional YAML config file (see configs/default.yaml)
        rows: Override the number of rows
        cols: Override the number of columns
        win_con: Override the number of pieces to connect
        agent_player: Seat (1 or 2) the NPC plays
        save_path: File used by save/load
        log_level: Logging level for engine diagnostics
    """
    logging.basicConfig(level=log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    app = load_config(config) if config is not None else AppConfig()
    game = GameConfig(
        rows=rows if rows is not None else app.game.rows,
        cols=cols if cols is not None else app.game.cols,
        win_con=win_con if win_con is not None else app.game.win_con,
    )
    board = BoardState(game)
    agent = HeuristicAgent(agent_player if agent_player is not None else app.session.agent_player)
    session = GameSession(board, agent if app.session.vs_agent else None)

    print("=" * 50)
    print("Connect N")
    print("=" * 50)
    run_session(session, agent, save_path or app.session.save_path)


def main() -> None:
    tyro.cli(play_human_vs_agent)


if __name__ == "__main__":
    main()
