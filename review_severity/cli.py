"""CLI 入口"""

import json
import sys
from pathlib import Path
from typing import Optional

import click
from pydantic import ValidationError

from .chains import create_severity_chain, setup_debug_logging
from .config import create_default_config, find_config_file, load_config
from .examples import EXAMPLE_INPUTS, verify_examples
from .function import build_function_descriptor
from .models.request import ReviewInput
from .models.severity import SEVERITY_LABELS, SeverityScore
from .prompts.templates import compile_request
from .scoring import InvalidProbabilitiesError, aggregate

LABEL_COLORS = {
    "Critical": "red",
    "Major": "magenta",
    "Moderate": "yellow",
    "Minor": "blue",
    "Trivial": "green",
}


def input_options(func):
    """评审意见的三个输入选项"""
    func = click.option("--context", "-x", default=None, help="额外的上下文")(func)
    func = click.option("--code", "-d", default=None, help="被评审的代码片段")(func)
    func = click.option("--comment", "-m", required=True, help="评审意见")(func)
    return func


def print_severity_score(result: SeverityScore):
    """打印评分结果"""
    separator = "=" * 60
    click.echo()
    click.echo(separator)
    click.echo("  评审意见严重级别")
    click.echo(separator)

    for label, probability in zip(SEVERITY_LABELS, result.probabilities):
        marker = "*" if label == result.label else " "
        name = click.style(f"{label.short_name:<9}", fg=LABEL_COLORS[label.short_name])
        click.echo(f" {marker} {name} {probability:6.2%}")

    click.echo(separator)
    click.echo(f"得分: {result.score:.4f}")
    click.echo(separator)
    click.echo()


def save_score_log(result: SeverityScore, log_file: Path):
    """保存评分日志"""
    log_file.write_text(result.model_dump_json(indent=2), encoding="utf-8")


@click.group()
def cli():
    """Review Severity - 评审意见严重级别评分工具"""
    pass


@cli.command(name="compile")
@input_options
@click.option("--json", "as_json", is_flag=True, help="以 JSON 输出编译后的任务")
def compile_command(comment: str, code: Optional[str], context: Optional[str], as_json: bool):
    """编译提示词"""
    request = compile_request(ReviewInput.from_fields(comment, code=code, context=context))

    if as_json:
        click.echo(json.dumps(request.to_dict(), ensure_ascii=False, indent=2))
        return

    click.echo(request.prompt)
    click.echo()
    for i, label in enumerate(request.candidate_labels, 1):
        click.echo(f"{i}. {label}")


@cli.command(name="aggregate", context_settings={"ignore_unknown_options": True})
@click.argument("probabilities", nargs=-1, type=float)
def aggregate_command(probabilities: tuple[float, ...]):
    """按固定权重计算得分（依次传入 5 个概率）"""
    try:
        score = aggregate(probabilities)
    except InvalidProbabilitiesError as e:
        raise click.UsageError(str(e))
    click.echo(f"{score:.4f}")


@cli.command()
@input_options
@click.option("--config", "-c", type=click.Path(exists=True), help="配置文件路径")
@click.option("--verbose", "-v", is_flag=True, help="输出调试日志")
def score(
    comment: str,
    code: Optional[str],
    context: Optional[str],
    config: Optional[str],
    verbose: bool,
):
    """调用模型对评审意见评分"""
    try:
        cfg = load_config(Path(config)) if config else load_config()
        setup_debug_logging(verbose=verbose)

        chain = create_severity_chain(cfg)
        click.echo("[评分] 正在分析...")
        result: SeverityScore = chain.invoke(
            ReviewInput.from_fields(comment, code=code, context=context)
        )

        print_severity_score(result)

        if cfg.output_file:
            log_file = Path(cfg.output_file)
            save_score_log(result, log_file)
            click.echo(f"评分日志已保存到: {log_file}")

    except FileNotFoundError as e:
        click.echo(click.style(f"[错误] {e}", fg="red"), err=True)
        sys.exit(1)
    except ValidationError as e:
        click.echo(click.style(f"[错误] 输入或配置无效: {e}", fg="red"), err=True)
        sys.exit(1)
    except Exception as e:
        click.echo(click.style(f"[错误] 评分失败: {e}", fg="red"), err=True)
        import traceback

        traceback.print_exc()
        sys.exit(1)


@cli.command()
def describe():
    """输出远程函数描述（JSON）"""
    click.echo(json.dumps(build_function_descriptor(), ensure_ascii=False, indent=2))


@cli.command(name="verify-examples")
def verify_examples_command():
    """校验回归样例的编译结果"""
    mismatches = verify_examples(EXAMPLE_INPUTS)

    if not mismatches:
        click.echo(click.style(f"[通过] {len(EXAMPLE_INPUTS)} 个样例全部一致", fg="green"))
        return

    for mismatch in mismatches:
        click.echo(click.style(f"[不一致] 样例 {mismatch.index}", fg="red"))
        click.echo(f"  期望: {mismatch.expected_prompt!r}")
        click.echo(f"  实际: {mismatch.actual_prompt!r}")
    click.echo(
        click.style(f"[失败] {len(mismatches)}/{len(EXAMPLE_INPUTS)} 个样例不一致", fg="red"),
        err=True,
    )
    sys.exit(1)


@cli.command()
@click.option("--path", "-p", type=click.Path(), help="配置文件保存路径")
def init(path: Optional[str]):
    """初始化配置文件"""
    try:
        config_path = create_default_config(Path(path) if path else None)
        click.echo(
            click.style(f"[成功] 配置文件已创建: {config_path}", fg="green", bold=True)
        )
        click.echo("\n请编辑配置文件，设置你的 API Key 等信息。")
    except FileExistsError as e:
        click.echo(click.style(f"[错误] {e}", fg="red"), err=True)
        sys.exit(1)


@cli.command()
def check():
    """检查配置是否正确"""
    try:
        config_path = find_config_file()
        if not config_path:
            click.echo(click.style("[错误] 未找到配置文件", fg="red"), err=True)
            click.echo("请运行: review-severity init")
            sys.exit(1)

        click.echo(f"配置文件: {config_path}")
        cfg = load_config(config_path)
        click.echo(f"模型: {cfg.llm.model}")
        click.echo(f"Base URL: {cfg.llm.base_url or '默认'}")
        click.echo(click.style("[成功] 配置有效", fg="green"))

    except Exception as e:
        click.echo(click.style(f"[错误] 配置检查失败: {e}", fg="red"), err=True)
        sys.exit(1)


def main():
    """主入口点"""
    cli()


if __name__ == "__main__":
    main()
