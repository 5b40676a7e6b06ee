"""
main.py - elb-instances 콘솔 스크립트 진입점

pyproject.toml의 [project.scripts]에서 main:main으로 등록됩니다.
"""

from cli.app import cli


def main() -> None:
    """cli.app:cli 실행"""
    cli(prog_name="elb-instances")


if __name__ == "__main__":
    main()
