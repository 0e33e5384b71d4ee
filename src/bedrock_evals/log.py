"""ロギング設定。"""

import logging

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(level_name: str) -> None:
    """ルートロガーをstderr出力で設定する。

    未知のレベル名が渡された場合はWARNINGにフォールバックする。
    """
    level = getattr(logging, level_name.upper(), None)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT)
