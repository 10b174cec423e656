"""
どこで: `engine.render.shader`。
何を: フルスクリーン矩形の頂点シェーダと、リップル（ディスプレイスメント）/ショックウェーブ/ブリットの各フラグメントシェーダ。
なぜ: フィルタの GLSL を Python 側の合成ロジックから分離し、プログラム生成を一箇所に集約するため。

座標系: すべてビューポート座標（左下原点, 論理 px）。`u_viewport` で UV と相互変換する。
"""

from __future__ import annotations

from typing import Any

FULLSCREEN_VERTEX = """
#version 330
in vec2 in_pos;
out vec2 v_uv;
void main() {
    v_uv = in_pos * 0.5 + 0.5;
    gl_Position = vec4(in_pos, 0.0, 1.0);
}
"""

BLIT_FRAGMENT = """
#version 330
uniform sampler2D u_texture;
in vec2 v_uv;
out vec4 f_color;
void main() {
    f_color = texture(u_texture, v_uv);
}
"""

# マップの rg を [-0.5, 0.5] に写して u_scale 倍だけサンプル位置をずらす。
DISPLACEMENT_FRAGMENT = """
#version 330
uniform sampler2D u_texture;
uniform sampler2D u_map;
uniform vec2 u_viewport;
uniform vec2 u_map_size;
uniform vec2 u_offset;
uniform vec2 u_scale;
in vec2 v_uv;
out vec4 f_color;
void main() {
    vec2 pos = v_uv * u_viewport;
    vec4 m = texture(u_map, (pos - u_offset) / u_map_size);
    vec2 shift = (m.rg - 0.5) * u_scale;
    f_color = texture(u_texture, clamp((pos + shift) / u_viewport, 0.0, 1.0));
}
"""

# 半径 u_time * u_speed のリングを波長幅で歪ませる。u_wave = (amplitude, wavelength, brightness, radius)
SHOCKWAVE_FRAGMENT = """
#version 330
const float PI = 3.14159265358979;
uniform sampler2D u_texture;
uniform vec2 u_viewport;
uniform vec2 u_center;
uniform float u_time;
uniform float u_speed;
uniform vec4 u_wave;
in vec2 v_uv;
out vec4 f_color;
void main() {
    vec2 pos = v_uv * u_viewport;
    float half_wavelength = u_wave.y * 0.5;
    float max_radius = u_wave.w;
    float current_radius = u_time * u_speed;
    float fade = 1.0;
    if (max_radius > 0.0) {
        if (current_radius > max_radius) {
            f_color = texture(u_texture, v_uv);
            return;
        }
        fade = 1.0 - pow(current_radius / max_radius, 2.0);
    }
    vec2 dir = pos - u_center;
    float dist = length(dir);
    if (dist <= 0.0 || half_wavelength <= 0.0
        || dist < current_radius - half_wavelength
        || dist > current_radius + half_wavelength) {
        f_color = texture(u_texture, v_uv);
        return;
    }
    float diff = (dist - current_radius) / half_wavelength;
    float p = 1.0 - pow(abs(diff), 2.0);
    float pow_diff = 1.25 * sin(diff * PI) * p * (u_wave.x * fade);
    vec2 uv = clamp((pos + normalize(dir) * pow_diff) / u_viewport, 0.0, 1.0);
    vec4 color = texture(u_texture, uv);
    color.rgb *= 1.0 + (u_wave.z - 1.0) * p * fade;
    f_color = color;
}
"""


class Shader:
    """フィルタ用プログラムの生成ヘルパ。"""

    @staticmethod
    def create_blit(ctx: Any) -> Any:
        return ctx.program(vertex_shader=FULLSCREEN_VERTEX, fragment_shader=BLIT_FRAGMENT)

    @staticmethod
    def create_displacement(ctx: Any) -> Any:
        return ctx.program(vertex_shader=FULLSCREEN_VERTEX, fragment_shader=DISPLACEMENT_FRAGMENT)

    @staticmethod
    def create_shockwave(ctx: Any) -> Any:
        return ctx.program(vertex_shader=FULLSCREEN_VERTEX, fragment_shader=SHOCKWAVE_FRAGMENT)


__all__ = [
    "BLIT_FRAGMENT",
    "DISPLACEMENT_FRAGMENT",
    "FULLSCREEN_VERTEX",
    "SHOCKWAVE_FRAGMENT",
    "Shader",
]
