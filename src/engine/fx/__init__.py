"""
どこで: `engine.fx` サブパッケージ。
何を: エフェクトのライフサイクル（ClockAdvancer）、発火方針（trigger）、レイアウト応答、設定を提供。
なぜ: エフェクトの共有状態を、フレーム tick と入力イベントという 2 種類のイベント源から一貫した規則で更新するため。

スレッドモデル（前提）:
- tick コールバックと入力コールバックは pyglet のイベントループ上の単一スレッドで、
  互いに割り込まずに完了まで実行される。このためエフェクトの clock/origin と
  クールダウン時刻はロックなしで更新している。
- マルチスレッドのホストへ移す場合は、エフェクト毎の排他（Lock）か、
  レジストリを専有する単一の所有者を導入し、前進と発火を互いに原子的にすること。
"""

from .clock import ClockAdvancer
from .config import ClockConfig, DisplacementConfig, FxConfig, MotionTriggerConfig
from .layout import LayoutResponder
from .trigger import AutoRespawnTrigger, ClickTrigger, CooldownGate, MotionTrigger, fire

__all__ = [
    "AutoRespawnTrigger",
    "ClickTrigger",
    "ClockAdvancer",
    "ClockConfig",
    "CooldownGate",
    "DisplacementConfig",
    "FxConfig",
    "LayoutResponder",
    "MotionTrigger",
    "MotionTriggerConfig",
    "fire",
]
