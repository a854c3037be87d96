"""牌组CLI渲染模块.

负责把牌组渲染为命令行文本，渲染方法都是纯函数。
"""

from card_deck.core.deck import Deck


class CLIRenderer:
    """CLI渲染器."""

    @staticmethod
    def render_deck(deck: Deck) -> str:
        """渲染整副牌.

        Args:
            deck: 牌组

        Returns:
            每行"<序号> <卡牌>"的字符串，空牌组返回空字符串
        """
        return "\n".join(deck.format_lines())

    @staticmethod
    def render_deal(hand: Deck, remainder: Deck) -> str:
        """渲染分牌结果.

        Args:
            hand: 手牌
            remainder: 剩余牌

        Returns:
            带标题的手牌和剩余牌
        """
        lines = [f"=== Hand ({len(hand)}) ==="]
        lines.extend(hand.format_lines())
        lines.append(f"=== Remainder ({len(remainder)}) ===")
        lines.extend(remainder.format_lines())
        return "\n".join(lines)
