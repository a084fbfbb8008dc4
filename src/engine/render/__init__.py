"""
どこで: `engine.render` サブパッケージ。
何を: 描画コマンドの記録面（DrawSurface）・曲線補間・Layer → GPU 転送/描画（Renderer/LineMesh/Shader）。
なぜ: シーン（何を描くか）と GPU リソース管理（どう描くか）の責務を分離するため。
"""
