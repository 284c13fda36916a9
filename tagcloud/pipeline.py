"""
Full tag cloud pipeline: read -> count -> size/color -> arrange -> render -> save -> measure.
"""

import os
import time
from typing import Dict, Optional, Tuple

from .config import CloudConfig
from .diagnostics import measure_layout
from .layouter import CircularCloudLayouter
from .render import (
    PillowTextMeasurer,
    check_bounds,
    render_cloud,
    render_debug_boxes,
    save_image,
)
from .tags import arrange_tags, build_tags, make_color_scheme
from .text import WordPreprocessor, count_frequencies, read_lines


def generate_tag_cloud(
    config: CloudConfig,
    measurer: Optional[PillowTextMeasurer] = None,
) -> Tuple[str, Dict[str, object]]:
    """
    Build the cloud described by `config` and save it.
    Returns (absolute image path, layout stats).
    """
    if measurer is None:
        measurer = PillowTextMeasurer(config.font_family)

    center = config.resolved_center()

    print("=== Tag Cloud ===")
    print(f"Input:  {config.input_file}")
    print(f"Output: {os.path.join(config.output_dir, config.output_file)}")
    if config.image_size is not None:
        print(f"Canvas: {config.image_size[0]}x{config.image_size[1]}")
    else:
        print("Canvas: auto")
    print(f"Center: ({center.x}, {center.y})")
    print(f"Font: {config.font_family} ({config.min_font_size}-{config.max_font_size}px)")
    print(f"Color scheme: {config.color_scheme}")
    print(f"Lowercase: {config.to_lower}")
    print(f"Stop words: {len(config.stop_words) or 'default'}")
    print()

    # 1. Read and count
    t0 = time.time()
    preprocessor = WordPreprocessor(config.stop_words, config.to_lower)
    words = preprocessor.process(read_lines(config.input_file))
    frequencies = count_frequencies(words)
    if not frequencies:
        raise ValueError("No words found in the input file after preprocessing")
    print(f"Reading: {time.time()-t0:.2f}s | {len(frequencies)} distinct words\n")

    # 2. Font sizes and colors
    scheme = make_color_scheme(config.color_scheme, config.seed)
    tags = build_tags(frequencies, config.min_font_size, config.max_font_size, scheme)

    # 3. Layout
    t1 = time.time()
    layouter = CircularCloudLayouter(
        center,
        radius_step_factor=config.radius_step_factor,
        placement_budget=config.placement_budget,
    )
    tags = arrange_tags(tags, layouter, measurer)
    if measurer.used_fallback:
        print(f"  Font '{config.font_family}' not found, using Pillow's default font")
    print(f"Layout: {time.time()-t1:.2f}s | {len(tags)} tags placed\n")

    rectangles = layouter.rectangles
    if config.image_size is not None:
        check_bounds(rectangles, config.image_size)

    # 4. Render and save
    canvas, offset = render_cloud(tags, measurer, config.image_size, config.background_color)
    path = save_image(canvas, config.output_file, config.output_dir)
    print(f"Saved: {path}")
    print(f"  Image: {canvas.shape[1]}x{canvas.shape[0]}")

    if config.debug_output:
        debug_canvas = render_debug_boxes(canvas, rectangles, offset)
        base, ext = os.path.splitext(config.output_file)
        debug_path = save_image(debug_canvas, f"{base}_boxes{ext}", config.output_dir)
        print(f"Saved debug boxes: {debug_path}")

    # 5. Measure
    stats = measure_layout(rectangles, center)
    stats["distinct_words"] = len(frequencies)
    stats["image"] = f"{canvas.shape[1]}x{canvas.shape[0]}"

    print("\n=== Results ===")
    for k, v in stats.items():
        if isinstance(v, float):
            print(f"  {k}: {v:.3f}")
        else:
            print(f"  {k}: {v}")

    return path, stats
