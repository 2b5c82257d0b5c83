import pytest

from connect4_engine.interfaces.cli import SimpleCLI, main, parse_moves
from connect4_engine.utils import GameStatus


def feed_input(monkeypatch, answers):
    answers = iter(answers)
    monkeypatch.setattr('builtins.input', lambda prompt='': next(answers))


def test_parse_moves():
    assert parse_moves("3,3, 4,") == [3, 3, 4]
    with pytest.raises(ValueError):
        parse_moves("3,x")


def test_replay_reports_winner(capsys):
    assert main(['replay', '--moves', '0,0,1,1,2,2,3']) == 0
    out = capsys.readouterr().out
    assert 'Player 1 won!' in out
    assert 'Winning run: [(5, 0), (5, 1), (5, 2), (5, 3)]' in out


def test_replay_reports_rejections(capsys):
    assert main(['replay', '--moves', '9,0,0,0,0,0,0,0']) == 0
    out = capsys.readouterr().out
    assert 'Move 1 rejected: Column 9 is not on the board.' in out
    assert 'Move 8 rejected: Column 0 is full.' in out
    assert 'Game in progress.' in out


def test_replay_bad_moves(capsys):
    assert main(['replay', '--moves', 'a,b']) == 1
    assert 'Error parsing moves' in capsys.readouterr().out


def test_replay_custom_size(capsys):
    cli = SimpleCLI()
    assert cli.run(['replay', '--width', '1', '--height', '1', '--moves', '0']) == 0
    assert cli.engine.get_status() == GameStatus.TIED
    assert "It's a tie!" in capsys.readouterr().out


def test_bad_board_size(capsys):
    assert main(['replay', '--width', '0', '--moves', '0']) == 1
    assert 'Error' in capsys.readouterr().out


def test_no_command(capsys):
    assert main([]) == 1
    assert 'Please specify a command' in capsys.readouterr().out


def test_play_until_win(monkeypatch, capsys):
    feed_input(monkeypatch, ['0', 'x', '6', '0', '9', '6', '0', '6', '0'])
    cli = SimpleCLI()
    assert cli.run(['play']) == 0
    out = capsys.readouterr().out
    assert 'Invalid input' in out
    assert 'Column 9 is not on the board.' in out
    assert 'Player 1 won!' in out
    assert cli.engine.get_status() == GameStatus.PLAYER_ONE_WON


def test_play_restart_and_quit(monkeypatch, capsys):
    feed_input(monkeypatch, ['3', 'r', 'q'])
    cli = SimpleCLI()
    cli.run(['play'])
    out = capsys.readouterr().out
    assert 'Game restarted.' in out
    assert 'Quitting game.' in out
    assert cli.engine.piece_count() == 0


def test_benchmark(capsys):
    assert main(['benchmark', '--iterations', '5', '--seed', '1']) == 0
    out = capsys.readouterr().out
    assert 'Played 5 games' in out
    assert 'IN_PROGRESS' not in out
