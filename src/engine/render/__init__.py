"""
どこで: `engine.render` サブパッケージ。
何を: シーン構成（pyglet）とフィルタ合成（ModernGL）、シェーダ、テクスチャ準備を提供。
なぜ: エフェクトの時間ロジック（engine.fx）と GPU リソース管理を分離するため。
"""
