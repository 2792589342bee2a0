from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # 環境変数のみで上書き可能（設定ファイルは読まない）
    model_config = SettingsConfigDict(env_prefix="SHARP_SCORE_")

    # ラプラシアン分散がこの値未満ならスコア 0.0
    VARIANCE_FLOOR: float = Field(default=1.0, ge=0.0)
    # sqrt(分散) をこの値で割ってスコア化する
    SCORE_DIVISOR: float = Field(default=3.5, gt=0.0)
    SCORE_CAP: float = Field(default=10.0, gt=0.0)
    # 品質ゲートの合格ライン（0-10 スコア）
    QUALITY_THRESHOLD: float = Field(default=3.0, ge=0.0)
    # ラプラシアン計算のスレッド数。None の場合は逐次処理。
    LAPLACIAN_WORKERS: int | None = Field(default=None, ge=1)
    LOG_LEVEL: str = "WARNING"


settings = Settings()
