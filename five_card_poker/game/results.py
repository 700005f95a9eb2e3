"""单局结果与最终排名的数据传输对象.

这个模块定义了Dealer与CLI之间传输数据的标准格式。
使用Pydantic dataclass确保数据验证和序列化的一致性。
"""

from typing import List, Sequence

from pydantic import Field, ValidationInfo, field_validator
from pydantic.dataclasses import dataclass as pydantic_dataclass

from ..core.player import Player
from ..evaluator.hand_rank import HandRank


@pydantic_dataclass
class HandSnapshot:
    """玩家亮牌快照.

    记录某一局中玩家的手牌和牌型。
    """
    player_name: str = Field(..., min_length=1, description="玩家名称")
    cards: List[str] = Field(..., description="手牌（按发牌顺序）")
    hand_rank: HandRank = Field(..., description="牌型")
    score: int = Field(..., ge=0, description="牌型分数")

    def describe(self) -> str:
        return f"{self.player_name}: [{', '.join(self.cards)}] ({self.hand_rank})"


@pydantic_dataclass
class RoundResult:
    """单局结果.

    包含所有玩家的亮牌、获胜者和奖金信息。
    """
    round_number: int = Field(..., ge=1, description="局数编号")
    hands: List[HandSnapshot] = Field(..., description="所有玩家的亮牌")
    winners: List[str] = Field(default_factory=list, description="获胜者名称")
    is_draw: bool = Field(False, description="是否全员平局")
    prize_per_winner: int = Field(0, ge=0, description="每位获胜者获得的奖金")

    @field_validator('winners')
    @classmethod
    def validate_winners(cls, v: List[str], info: ValidationInfo) -> List[str]:
        """验证获胜者都出现在亮牌列表中."""
        hands = info.data.get('hands')
        if hands is not None:
            names = {hand.player_name for hand in hands}
            unknown = [name for name in v if name not in names]
            if unknown:
                raise ValueError(f"获胜者 {unknown} 不在亮牌列表中")
        return v

    @field_validator('prize_per_winner')
    @classmethod
    def validate_draw_prize(cls, v: int, info: ValidationInfo) -> int:
        """平局不发放奖金."""
        if info.data.get('is_draw') and v != 0:
            raise ValueError("平局不能发放奖金")
        return v

    @property
    def winner_names(self) -> List[str]:
        return list(self.winners)

    def winning_hands(self) -> List[HandSnapshot]:
        return [hand for hand in self.hands if hand.player_name in self.winners]

    def summary(self) -> str:
        """返回单局结果的一行描述."""
        if self.is_draw:
            return f"第 {self.round_number} 局: 平局，无奖金"
        winners = ", ".join(f"{hand.player_name}({hand.hand_rank})" for hand in self.winning_hands())
        return f"第 {self.round_number} 局: 获胜者 {winners}，各得 {self.prize_per_winner}"


@pydantic_dataclass
class PlayerStanding:
    """玩家最终排名."""
    position: int = Field(..., ge=1, description="名次")
    name: str = Field(..., min_length=1, description="玩家名称")
    money: int = Field(..., ge=0, description="最终资金")
    wins: int = Field(0, ge=0, description="胜局数")
    losses: int = Field(0, ge=0, description="负局数")
    draws: int = Field(0, ge=0, description="平局数")


def build_hand_snapshot(player: Player) -> HandSnapshot:
    """根据玩家当前手牌创建亮牌快照."""
    hand_rank = player.hand.evaluate()
    return HandSnapshot(
        player_name=player.name,
        cards=[str(card) for card in player.hand.get_cards()],
        hand_rank=hand_rank,
        score=hand_rank.score,
    )


def build_standings(players: Sequence[Player]) -> List[PlayerStanding]:
    """按资金降序生成排名，资金相同时保持原顺序."""
    ordered = sorted(players, key=lambda p: p.money, reverse=True)
    return [
        PlayerStanding(
            position=index,
            name=player.name,
            money=player.money,
            wins=player.win_count,
            losses=player.lose_count,
            draws=player.draw_count,
        )
        for index, player in enumerate(ordered, 1)
    ]
