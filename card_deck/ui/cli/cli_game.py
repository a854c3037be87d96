"""牌组CLI入口.

不带参数运行时：新建一副牌，洗牌，并按"<序号> <卡牌>"逐行输出。
加载或保存失败时在标准输出打印错误并以状态码1退出。
"""

import logging
from typing import Optional

import click

from card_deck.application import ConfigService, DeckService
from card_deck.ui.cli.render import CLIRenderer


def _setup_logging(config_service: ConfigService, profile: str) -> bool:
    """按配置初始化日志，配置不存在时返回False."""
    result = config_service.get_logging_config(profile)
    if not result.success:
        return False
    logging_config = result.data
    logging.basicConfig(level=logging_config.level, format=logging_config.log_format)
    return True


@click.command(name="card-deck")
@click.option("--load", "load_path", type=click.Path(), default=None,
              help="从文件加载牌组，而不是新建一副牌")
@click.option("--save", "save_path", type=click.Path(), default=None,
              help="把最终的牌组保存到文件")
@click.option("--seed", type=int, default=None, help="洗牌随机种子")
@click.option("--no-shuffle", is_flag=True, default=False, help="不洗牌")
@click.option("--deal", "hand_size", type=int, default=None,
              help="输出前N张手牌和剩余的牌")
@click.option("--profile", default="default", show_default=True, help="配置名")
@click.option("--debug", is_flag=True, default=False, help="等同于 --profile debug")
@click.pass_context
def main(ctx: click.Context, load_path: Optional[str], save_path: Optional[str],
         seed: Optional[int], no_shuffle: bool, hand_size: Optional[int],
         profile: str, debug: bool) -> None:
    """新建(或加载)一副牌，洗牌并逐行打印."""
    if debug:
        profile = "debug"

    config_service = ConfigService()
    if not _setup_logging(config_service, profile):
        click.echo(f"Error: unknown profile '{profile}'")
        ctx.exit(1)
    logger = logging.getLogger(__name__)

    service = DeckService(config_service=config_service, profile=profile)

    if load_path is not None:
        load_result = service.load_deck(load_path)
        if not load_result.success:
            click.echo(f"Error: {load_result.message}")
            ctx.exit(1)
        deck = load_result.data
    else:
        deck = service.new_deck().data

    if not no_shuffle:
        service.shuffle(deck, seed)
    logger.debug(f"牌组就绪: {deck!r}")

    # 先分牌，张数无效时不输出牌组
    deal_result = None
    if hand_size is not None:
        deal_result = service.deal(deck, hand_size)
        if not deal_result.success:
            click.echo(f"Error: {deal_result.message}")
            ctx.exit(1)

    if not deck.is_empty:
        click.echo(CLIRenderer.render_deck(deck))

    if deal_result is not None:
        hand, remainder = deal_result.data
        click.echo(CLIRenderer.render_deal(hand, remainder))

    if save_path is not None:
        save_result = service.save_deck(deck, save_path)
        if not save_result.success:
            click.echo(f"Error: {save_result.message}")
            ctx.exit(1)
        logger.info(save_result.message)


if __name__ == "__main__":
    main()
