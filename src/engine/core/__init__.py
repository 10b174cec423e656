"""
どこで: `engine.core` サブパッケージ。
何を: フレーム駆動（Tickable/FrameClock）と描画ウィンドウを提供。
なぜ: 時間前進と描画の基盤を構成し、上位層（fx/render/aquafx）から再利用可能にするため。
"""
