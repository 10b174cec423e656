"""
どこで: `util.utils`。
何を: YAML 構成（`configs/default.yaml` + ルート `config.yaml`）の読み込みとセクション取得。
なぜ: ウィンドウ/ヘッダ/エフェクト定数を設定ファイルで差し替え可能にし、読み込み失敗でも起動を止めないため。
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Mapping

import yaml

logger = logging.getLogger(__name__)


def _safe_load_yaml(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.warning("config load failed: %s (%s)", path, e)
        return {}
    return data if isinstance(data, dict) else {}


def _find_project_root(start: Path) -> Path:
    """プロジェクトルートを推定して返す。

    - 上位に `.git` / `pyproject.toml` / `configs/` を持つもっとも近いディレクトリ。
    - 見つからない場合は `<repo>/src/util/utils.py -> <repo>` を仮定する。
    """
    cur = start.resolve()
    for parent in [cur] + list(cur.parents):
        if (
            (parent / ".git").exists()
            or (parent / "pyproject.toml").exists()
            or (parent / "configs").exists()
        ):
            return parent
    return cur.parent.parent


def load_config(project_root: Path | None = None) -> Dict[str, Any]:
    """構成を読み込んで辞書で返す（フェイルソフト）。

    優先順:
    1) `configs/default.yaml`（ベース）
    2) ルート `config.yaml`（トップレベルのセクション単位で上書き）

    どちらも無い/不正な場合は空辞書。
    """
    root = project_root if project_root is not None else _find_project_root(Path(__file__).parent)
    base: Dict[str, Any] = {}

    default_path = root / "configs" / "default.yaml"
    if default_path.exists():
        base.update(_safe_load_yaml(default_path))

    root_config_path = root / "config.yaml"
    if root_config_path.exists():
        base.update(_safe_load_yaml(root_config_path))

    return base


def config_section(cfg: Mapping[str, Any] | None, name: str) -> Dict[str, Any]:
    """`cfg[name]` を辞書として返す（欠落/型違いは空辞書）。"""
    if not isinstance(cfg, Mapping):
        return {}
    sec = cfg.get(name)
    return dict(sec) if isinstance(sec, Mapping) else {}
