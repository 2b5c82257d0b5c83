"""
cli.py - Command-line interface for the Connect Four engine

A thin terminal front end: it turns typed columns into drop_piece() calls
and prints whatever the engine reports. Commands:

    play       two players take turns at the same terminal
    replay     apply a comma-separated list of columns and show the result
    benchmark  time random games
"""

import argparse
import random
import sys
from typing import List, Optional

from connect4_engine.debug import debug, DebugLevel
from connect4_engine.game.rules import GameEngine, MoveRejected
from connect4_engine.utils import DEFAULT_HEIGHT, DEFAULT_WIDTH, GameStatus, RejectReason

QUIT = -1
RESTART = -2

REJECT_MESSAGES = {
    RejectReason.INVALID_COLUMN: "Column {column} is not on the board.",
    RejectReason.COLUMN_FULL: "Column {column} is full.",
    RejectReason.GAME_OVER: "The game is already over.",
}


def describe_status(status: GameStatus) -> str:
    """Human-readable line for a game status."""
    if status == GameStatus.PLAYER_ONE_WON:
        return "Player 1 won!"
    if status == GameStatus.PLAYER_TWO_WON:
        return "Player 2 won!"
    if status == GameStatus.TIED:
        return "It's a tie!"
    return "Game in progress."


def parse_moves(moves_str: str) -> List[int]:
    """Parse "3,3,4" into [3, 3, 4]; raises ValueError on bad input."""
    return [int(part) for part in moves_str.split(',') if part.strip()]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Connect Four CLI')

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument('--width', type=int, default=DEFAULT_WIDTH, help='Number of columns')
    common.add_argument('--height', type=int, default=DEFAULT_HEIGHT, help='Number of rows')
    common.add_argument('--debug', action='store_true', help='Enable debug logging')
    common.add_argument('--debug-level', default='warning',
                        choices=[level.name.lower() for level in DebugLevel],
                        help='Logging level when --debug is not given')
    common.add_argument('--log-file', default=None, help='Also write log output to this file')

    subparsers = parser.add_subparsers(dest='command', help='Command to run')

    subparsers.add_parser('play', parents=[common], help='Play a two-player game')

    replay_parser = subparsers.add_parser('replay', parents=[common],
                                          help='Apply a list of moves and show the result')
    replay_parser.add_argument('--moves', required=True,
                               help='Comma-separated columns, e.g. 3,3,4,4')

    benchmark_parser = subparsers.add_parser('benchmark', parents=[common],
                                             help='Time random games')
    benchmark_parser.add_argument('--iterations', type=int, default=1000,
                                  help='Number of games to play')
    benchmark_parser.add_argument('--seed', type=int, default=None, help='Random seed')

    return parser


class SimpleCLI:
    """Terminal front end for a GameEngine."""

    def __init__(self, engine: Optional[GameEngine] = None):
        self.engine = engine or GameEngine()
        self.args = None

    def parse_args(self, argv: Optional[List[str]] = None) -> None:
        self.args = build_parser().parse_args(argv)

        if getattr(self.args, 'debug', False):
            debug.configure(level=DebugLevel.DEBUG)
        elif getattr(self.args, 'debug_level', None):
            debug.configure(level=DebugLevel[self.args.debug_level.upper()])

        if getattr(self.args, 'log_file', None):
            debug.configure(log_file=self.args.log_file)

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Run the command from the parsed arguments; returns an exit code."""
        if not self.args:
            self.parse_args(argv)

        if self.args.command is None:
            print("Please specify a command. Use --help for options.")
            return 1

        try:
            self.engine.reset(self.args.width, self.args.height)
        except ValueError as e:
            print(f"Error: {e}")
            return 1

        if self.args.command == 'play':
            self.play_game()
        elif self.args.command == 'replay':
            return self.replay()
        elif self.args.command == 'benchmark':
            self.benchmark()
        return 0

    def play_game(self) -> None:
        """Let two players take turns until the game ends or someone quits."""
        last_column = self.engine.width - 1
        print("Starting a new Connect Four game!")
        print(f"Enter a column number (0-{last_column}) to drop a piece.")
        print("Other commands: 'q' to quit, 'r' to restart.")
        print(self.engine.render())

        while not self.engine.is_game_over():
            move = self.get_human_move()

            if move is None:
                continue
            if move == QUIT:
                print("Quitting game.")
                return
            if move == RESTART:
                self.engine.reset(self.engine.width, self.engine.height)
                print("Game restarted.")
                print(self.engine.render())
                continue

            outcome = self.engine.drop_piece(move)
            if isinstance(outcome, MoveRejected):
                print(REJECT_MESSAGES[outcome.reason].format(column=move))
                continue

            print(self.engine.render())

        print("Game over!")
        print(describe_status(self.engine.get_status()))

    def get_human_move(self) -> Optional[int]:
        """
        Read one command from the current player.

        Returns:
            A column index, QUIT, RESTART, or None if the input was not understood
        """
        player = self.engine.current_player
        user_input = input(f"Player {player.value} ({player}), your move: ").strip().lower()

        if user_input == 'q':
            return QUIT
        if user_input == 'r':
            return RESTART

        try:
            return int(user_input)
        except ValueError:
            print("Invalid input. Please enter a column number or a command.")
            return None

    def replay(self) -> int:
        """Apply --moves in order and print the final board and status."""
        try:
            moves = parse_moves(self.args.moves)
        except ValueError as e:
            print(f"Error parsing moves: {e}")
            return 1

        for index, column in enumerate(moves, start=1):
            outcome = self.engine.drop_piece(column)
            if isinstance(outcome, MoveRejected):
                message = REJECT_MESSAGES[outcome.reason].format(column=column)
                print(f"Move {index} rejected: {message}")

        print(self.engine.render())
        print(describe_status(self.engine.get_status()))
        if self.engine.winning_run:
            print(f"Winning run: {self.engine.winning_run}")
        return 0

    def benchmark(self) -> None:
        """Play random games and report how long moves take."""
        iterations = self.args.iterations
        rng = random.Random(self.args.seed)
        width, height = self.engine.width, self.engine.height
        results = {status: 0 for status in GameStatus}
        total_moves = 0

        debug.start_timer("benchmark")
        for _ in range(iterations):
            self.engine.reset(width, height)
            while not self.engine.is_game_over():
                self.engine.drop_piece(rng.choice(self.engine.get_valid_moves()))
                total_moves += 1
            results[self.engine.get_status()] += 1
        elapsed = debug.end_timer("benchmark", "cli") or 0.0

        print(f"Played {iterations} games with {total_moves} moves "
              f"in {elapsed:.4f} seconds")
        if total_moves:
            print(f"{elapsed / total_moves * 1000:.6f} ms per move")
        for status, count in results.items():
            if status != GameStatus.IN_PROGRESS:
                print(f"  {status.name}: {count}")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    return SimpleCLI().run(argv)


if __name__ == "__main__":
    sys.exit(main())
