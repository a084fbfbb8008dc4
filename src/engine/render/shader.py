"""
どこで: `engine.render.shader`。
何を: 太線描画用 GLSL（頂点→ジオメトリ→フラグメント）と ModernGL プログラム生成。
なぜ: 頂点ごとの色/太さ [px] を持つ LINE_STRIP を、1 回の draw call で四角形帯に展開するため。

頂点属性:
- `in_vert` (vec2): 画面座標 [px]（左上原点）
- `in_color` (vec4): RGBA 0–1
- `in_width` (float): 線幅 [px]
"""

from __future__ import annotations

from typing import Any

VERTEX_SHADER = """
#version 330
uniform mat4 projection;
in vec2 in_vert;
in vec4 in_color;
in float in_width;
out vec4 v_color;
out float v_width;
void main() {
    gl_Position = projection * vec4(in_vert, 0.0, 1.0);
    v_color = in_color;
    v_width = in_width;
}
"""

GEOMETRY_SHADER = """
#version 330
layout(lines) in;
layout(triangle_strip, max_vertices = 4) out;
uniform vec2 viewport;
in vec4 v_color[];
in float v_width[];
out vec4 g_color;
void main() {
    vec4 p0 = gl_in[0].gl_Position;
    vec4 p1 = gl_in[1].gl_Position;
    vec2 half_vp = viewport * 0.5;
    vec2 dir = (p1.xy - p0.xy) * half_vp;
    float len = length(dir);
    dir = len > 1e-6 ? dir / len : vec2(1.0, 0.0);
    vec2 normal = vec2(-dir.y, dir.x);
    // 1px 未満の線はヘアラインとして 1px で描く
    vec2 off = normal * (max(v_width[0], 1.0) * 0.5) / half_vp;

    g_color = v_color[0];
    gl_Position = vec4(p0.xy + off, p0.zw);
    EmitVertex();
    gl_Position = vec4(p0.xy - off, p0.zw);
    EmitVertex();
    g_color = v_color[1];
    gl_Position = vec4(p1.xy + off, p1.zw);
    EmitVertex();
    gl_Position = vec4(p1.xy - off, p1.zw);
    EmitVertex();
    EndPrimitive();
}
"""

FRAGMENT_SHADER = """
#version 330
in vec4 g_color;
out vec4 frag_color;
void main() {
    frag_color = g_color;
}
"""


class Shader:
    @staticmethod
    def create_shader(ctx: Any) -> Any:
        """太線描画用のプログラムを生成して返す。"""
        return ctx.program(
            vertex_shader=VERTEX_SHADER,
            geometry_shader=GEOMETRY_SHADER,
            fragment_shader=FRAGMENT_SHADER,
        )


__all__ = ["Shader", "VERTEX_SHADER", "GEOMETRY_SHADER", "FRAGMENT_SHADER"]
