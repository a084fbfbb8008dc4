"""
どこで: `engine.core` サブパッケージ。
何を: Geometry・2D アフィン変換・ノイズ場・フレーム駆動（Tickable/FrameClock）・描画ウィンドウを提供。
なぜ: 計算と描画の基盤を構成し、上位層（scene/layers/render/api）から再利用可能にするため。
"""
