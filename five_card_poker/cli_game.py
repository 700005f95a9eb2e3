#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""五张牌扑克CLI模拟.

使用固定的4名玩家、初始资金和局数自动进行模拟，
逐局输出手牌和结果，最后按资金输出排名。
"""

import logging
from typing import List, Optional

import click

from five_card_poker.core import GameConfig, Player
from five_card_poker.game import Dealer, PlayerStanding, RoundResult, build_standings


MEDALS = ["🥇", "🥈", "🥉"]
LOSER_MEDAL = "😢"
SEPARATOR = "════════════════════════════════════════"


class FiveCardPokerCLI:
    """五张牌扑克CLI界面.

    根据配置创建玩家和庄家，运行模拟并输出结果。
    """

    def __init__(self, config: Optional[GameConfig] = None, verbose: bool = True):
        self.config = config or GameConfig.default()

        # 设置日志
        level = logging.INFO if verbose else logging.WARNING
        logging.basicConfig(level=level, format='%(message)s')
        logging.getLogger("five_card_poker").setLevel(level)

        self.players: List[Player] = self.config.create_players()
        self.dealer = Dealer(config=self.config)

    def print_banner(self) -> None:
        click.echo("╔════════════════════════════════════════╗")
        click.echo("      🎰 五张牌扑克 模拟赛 🎰      ")
        click.echo("╚════════════════════════════════════════╝")
        click.echo()
        click.echo(f"玩家数: {len(self.players)}名")
        click.echo(f"总局数: {self.config.total_rounds}局")
        click.echo(f"初始资金: {self.config.initial_money}\n")

    def run(self) -> List[RoundResult]:
        """运行完整模拟并输出最终排名."""
        self.print_banner()
        results = self.dealer.play_game(self.players, self.config.total_rounds)
        self.print_final_results(build_standings(self.players))
        return results

    @staticmethod
    def format_standing(standing: PlayerStanding) -> str:
        index = standing.position - 1
        medal = MEDALS[index] if index < len(MEDALS) else LOSER_MEDAL
        return (f"{medal} 第{standing.position}名: {standing.name} - {standing.money:,} "
                f"({standing.wins}胜 {standing.losses}负 {standing.draws}平)")

    def print_final_results(self, standings: List[PlayerStanding]) -> None:
        click.echo("\n🎰 五张牌扑克 - 最终结果 🎰")
        click.echo(SEPARATOR)
        for standing in standings:
            click.echo(self.format_standing(standing))
        click.echo(SEPARATOR)
        click.echo("✨ 模拟结束! ✨")


@click.command()
@click.option("--rounds", type=click.IntRange(min=1), default=None,
              help="总局数（默认100）")
@click.option("--seed", type=int, default=None,
              help="随机种子，用于可重现的模拟")
@click.option("--quiet", is_flag=True, default=False,
              help="不输出每局的详细过程")
def main(rounds: Optional[int], seed: Optional[int], quiet: bool) -> None:
    """CLI模拟主入口."""
    config = GameConfig.default()
    overrides = {}
    if rounds is not None:
        overrides["total_rounds"] = rounds
    if seed is not None:
        overrides["random_seed"] = seed
    if overrides:
        config = config.with_overrides(**overrides)

    FiveCardPokerCLI(config, verbose=not quiet).run()


if __name__ == "__main__":
    main()
