"""
End-to-end tests for puzzle generation and the command-line front ends.
"""

import io
import random

import pytest
from bitsudoku import Board, Square, Sudoku, GeneratorConfig, generate_unique
from bitsudoku.engine import generate_solved
from bitsudoku import solve as solve_cli
from bitsudoku import generate as generate_cli


class TestGeneration:
    """Test random generation."""
    
    def test_generate_solved(self, rng):
        """Test that a random solved position is complete and consistent."""
        sudoku = generate_solved(rng)
        assert sudoku.is_solved()
        assert Board(sudoku.board.to_numpy().reshape(-1)) == sudoku.board
    
    def test_generate_unique_minimal(self, rng):
        """Test that a fully reduced puzzle is unique and solves to its pair."""
        puzzle, solution = generate_unique(0, rng=rng)
        
        assert solution.is_solved()
        assert puzzle.is_unique_solvable()
        assert puzzle.board.hint_count() < 81
        
        # Hints agree with the solution
        for sq in Square.all():
            if puzzle.board[sq] is not None:
                assert puzzle.board[sq] == solution.board[sq]
        
        copy = puzzle.copy()
        assert copy.solve()
        assert copy == solution
    
    def test_pair_does_not_alias(self, rng):
        """Test that puzzle and solution are independent."""
        puzzle, solution = generate_unique(75, rng=rng)
        before = solution.copy()
        puzzle.solve()
        puzzle.take(Square(0))
        assert solution == before
    
    def test_generate_unique_full(self, rng):
        """Test that hint_min=81 removes nothing."""
        puzzle, solution = Sudoku.generate_unique(81, rng=rng)
        assert puzzle == solution
        assert puzzle.is_solved()
        assert puzzle.is_unique_solvable()
    
    def test_hint_min_respected(self, rng):
        """Test that removal stops at hint_min."""
        puzzle, _ = generate_unique(60, rng=rng)
        assert puzzle.board.hint_count() >= 60
        assert puzzle.is_unique_solvable()
    
    def test_reproducible(self):
        """Test that the same seed gives the same puzzle."""
        first = generate_unique(45, rng=random.Random(7))
        second = generate_unique(45, rng=random.Random(7))
        assert first == second
    
    def test_node_limit_too_small(self, rng):
        """Test that budgets no attempt can fit in are refused up front."""
        with pytest.raises(ValueError, match="node_limit"):
            GeneratorConfig(node_limit=50, seed=1)
        with pytest.raises(ValueError, match="node_limit"):
            generate_solved(rng, node_limit=81)
        with pytest.raises(ValueError, match="node_limit"):
            generate_unique(0, rng=rng, node_limit=10)
    
    def test_hint_min_out_of_range(self):
        """Test config validation of hint_min."""
        with pytest.raises(ValueError, match="hint_min"):
            GeneratorConfig(hint_min=82)
        with pytest.raises(ValueError, match="hint_min"):
            GeneratorConfig(hint_min=-1)
    
    def test_config_with_arguments(self, rng):
        """Test that a config cannot be mixed with explicit arguments."""
        config = GeneratorConfig(hint_min=70, seed=5)
        with pytest.raises(TypeError, match="not both"):
            generate_unique(70, config=config)
        with pytest.raises(TypeError, match="not both"):
            generate_unique(rng=rng, config=config)
    
    def test_config(self):
        """Test generation driven by a config."""
        config = GeneratorConfig(hint_min=50, seed=11)
        puzzle, solution = generate_unique(config=config)
        again, _ = generate_unique(config=config)
        
        assert puzzle.board.hint_count() >= 50
        assert puzzle == again
        assert solution.is_solved()


class TestSolveCli:
    """Test the solve front end."""
    
    def test_solve_text(self, puzzle_text, solution_text):
        """Test solving a unique puzzle."""
        output = solve_cli.solve_text(puzzle_text)
        assert output == str(Board.parse(solution_text))
        assert "WARN" not in output
    
    def test_solve_text_not_unique(self):
        """Test the uniqueness warning."""
        output = solve_cli.solve_text("0" * 81)
        lines = output.split("\n")
        assert lines[0] == "WARN: not uniquely solvable"
        assert len(lines) == 11
    
    def test_solve_text_no_solution(self):
        """Test an unsolvable board."""
        text = "123456780" + "0" * 36 + "000000009" + "0" * 27
        output = solve_cli.solve_text(text)
        assert output == "WARN: not uniquely solvable\nNO SOLUTION\n"
    
    def test_main_stdin(self, monkeypatch, capsys, puzzle_text, solution_text):
        """Test reading the board from stdin."""
        monkeypatch.setattr('sys.stdin', io.StringIO(puzzle_text))
        assert solve_cli.main([]) == 0
        
        captured = capsys.readouterr()
        assert captured.out == str(Board.parse(solution_text))
    
    def test_main_file(self, tmp_path, capsys, puzzle_text, solution_text):
        """Test reading the board from a file."""
        path = tmp_path / "puzzle.txt"
        path.write_text(str(Board.parse(puzzle_text)))
        assert solve_cli.main([str(path)]) == 0
        
        captured = capsys.readouterr()
        assert captured.out == str(Board.parse(solution_text))
    
    def test_main_parse_error(self, monkeypatch, capsys):
        """Test that a bad board is reported on stderr."""
        monkeypatch.setattr('sys.stdin', io.StringIO("1" * 81))
        assert solve_cli.main([]) == 1
        
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "illegal" in captured.err


class TestGenerateCli:
    """Test the generate front end."""
    
    def test_main(self, capsys):
        """Test printing a puzzle and its solution."""
        assert generate_cli.main(['--seed', '3', '--hint-min', '50']) == 0
        
        out = capsys.readouterr().out
        puzzle_text, solution_text = out.split("\n\n")
        puzzle = Sudoku(Board.parse(puzzle_text))
        solution = Sudoku(Board.parse(solution_text))
        
        assert puzzle.board.hint_count() >= 50
        assert solution.is_solved()
        assert puzzle.solve()
        assert puzzle == solution
    
    def test_main_pretty(self, capsys):
        """Test boxed output."""
        assert generate_cli.main(['--seed', '3', '--hint-min', '70', '--pretty']) == 0
        
        out = capsys.readouterr().out
        assert out.count('+-------+-------+-------+') == 8
    
    def test_main_rejects_bad_hint_min(self):
        """Test argument validation."""
        with pytest.raises(SystemExit):
            generate_cli.main(['--hint-min', '82'])
        with pytest.raises(SystemExit):
            generate_cli.main(['--node-limit', '10'])
