"""
CLI集成测试.

使用click的CliRunner运行card-deck命令，验证输出格式与退出码.
"""

import random

import pytest
from click.testing import CliRunner

from card_deck.core.deck import Deck
from card_deck.ui.cli.cli_game import main


@pytest.fixture
def runner():
    """CliRunner fixture"""
    return CliRunner()


@pytest.mark.integration
class TestCardDeckCLI:
    """card-deck命令测试."""

    def test_no_arguments_prints_shuffled_deck(self, runner):
        """测试不带参数时输出洗好的16张牌."""
        result = runner.invoke(main, [])

        assert result.exit_code == 0
        lines = result.stdout.splitlines()
        assert len(lines) == 16
        indices = [line.split(" ", 1)[0] for line in lines]
        cards = [line.split(" ", 1)[1] for line in lines]
        assert indices == [str(i) for i in range(16)]
        assert sorted(cards) == sorted(Deck.new_deck())

    def test_no_shuffle_prints_fixed_order(self, runner):
        """测试--no-shuffle保持建牌顺序."""
        result = runner.invoke(main, ["--no-shuffle"])

        assert result.exit_code == 0
        assert result.stdout.splitlines() == Deck.new_deck().format_lines()

    def test_seed_is_reproducible(self, runner):
        """测试相同种子输出相同."""
        first = runner.invoke(main, ["--seed", "7"])
        second = runner.invoke(main, ["--seed", "7"])

        expected = Deck.new_deck()
        expected.shuffle(random.Random(7))

        assert first.stdout == second.stdout
        assert first.stdout.splitlines() == expected.format_lines()

    def test_save_then_load(self, runner, deck_file):
        """测试保存后再加载得到相同顺序."""
        saved = runner.invoke(main, ["--seed", "3", "--save", str(deck_file)])
        assert saved.exit_code == 0
        assert deck_file.exists()

        loaded = runner.invoke(main, ["--load", str(deck_file), "--no-shuffle"])
        assert loaded.exit_code == 0
        assert loaded.stdout == saved.stdout

    def test_load_missing_file_exits_with_status_1(self, runner, tmp_path):
        """测试加载失败时在标准输出报错并以1退出."""
        result = runner.invoke(main, ["--load", str(tmp_path / "missing.txt")])

        assert result.exit_code == 1
        assert "Error:" in result.stdout
        assert "missing.txt" in result.stdout

    def test_save_failure_exits_with_status_1(self, runner, tmp_path):
        """测试保存失败时以1退出."""
        result = runner.invoke(main, ["--save", str(tmp_path / "no" / "deck.txt")])

        assert result.exit_code == 1
        assert "Error:" in result.stdout

    def test_deal(self, runner):
        """测试--deal输出手牌和剩余牌."""
        result = runner.invoke(main, ["--no-shuffle", "--deal", "4"])

        assert result.exit_code == 0
        lines = result.stdout.splitlines()
        assert lines[16] == "=== Hand (4) ==="
        assert lines[17:21] == ["0 Ace of Spades", "1 Two of Spades",
                                "2 Three of Spades", "3 Four of Spades"]
        assert lines[21] == "=== Remainder (12) ==="
        assert lines[22] == "0 Ace of Diamonds"

    def test_deal_out_of_range(self, runner):
        """测试--deal超出范围时以1退出，且不输出牌组."""
        result = runner.invoke(main, ["--deal", "17"])

        assert result.exit_code == 1
        lines = result.stdout.splitlines()
        assert len(lines) == 1
        assert lines[0].startswith("Error:")

    def test_unknown_profile(self, runner):
        """测试未知配置名以1退出."""
        result = runner.invoke(main, ["--profile", "nope"])

        assert result.exit_code == 1
        assert "unknown profile" in result.stdout
