import random

import streamlit as st
import streamlit_shadcn_ui as ui

from function_lab import config
from function_lab.generator import generate_from_request
from function_lab.graph_engine import build_figure
from function_lab.logger import configure_logging
from function_lab.models import Point
from function_lab.projector import project
from function_lab.sketch import compare_sketch, simplify_stroke
from function_lab.ui_components import checklist, problem_controls
from function_lab.verbal_descriptions import describe_characteristics, investigation_steps

configure_logging()

st.set_page_config(page_title=config.APP_TITLE, layout="wide")
st.title(config.APP_TITLE)
st.caption("Pick a family and a difficulty, generate a function, then investigate it step by step.")

if "rng" not in st.session_state:
    st.session_state["rng"] = random.Random()
if "generated" not in st.session_state:
    st.session_state["generated"] = None
if "sketch" not in st.session_state:
    st.session_state["sketch"] = []
if "show_solution" not in st.session_state:
    st.session_state["show_solution"] = False


def _parse_sketch(text: str):
    points = []
    for line in text.splitlines():
        parts = line.replace(";", ",").split(",")
        if len(parts) != 2:
            continue
        try:
            points.append(Point(float(parts[0]), float(parts[1])))
        except ValueError:
            continue
    return points


left_col, right_col = st.columns([1, 2], gap="large")

with left_col:
    st.header("Problem")
    family, difficulty = problem_controls()
    sketch_mode = st.toggle("Sketch first", key="sketch_mode")
    if ui.button(text="Generate function", key="generate_btn"):
        st.session_state["generated"] = generate_from_request(
            {"family": family, "difficulty": difficulty}, st.session_state["rng"]
        )
        st.session_state["show_solution"] = False
        st.session_state["sketch"] = []

    generated = st.session_state["generated"]
    if generated is not None:
        st.subheader("Expression")
        st.code(generated.expression, language=None)
        checklist(
            "Investigation",
            investigation_steps(generated.family, generated.difficulty, sketch=sketch_mode),
            key_prefix=f"steps_{generated.family.value}_{generated.difficulty.value}",
        )

with right_col:
    st.header("Graph")
    generated = st.session_state["generated"]
    if generated is None:
        st.info("Generate a function to see its graph.")
    else:
        if sketch_mode:
            sketch_text = st.text_area("Your sketch: one x, y pair per line", key="sketch_points")
            if ui.button(text="Compare sketch", key="compare_btn"):
                stroke = simplify_stroke(_parse_sketch(sketch_text))
                st.session_state["sketch"] = stroke
                result = compare_sketch(stroke, generated)
                if result.compared == 0:
                    st.warning("No sketch points could be compared.")
                else:
                    verdict = "Close match" if result.passed else "Keep refining"
                    st.write(
                        f"{verdict}: {result.within_tolerance:.0%} of {result.compared} points within tolerance, "
                        f"mean error {result.mean_error:.2f}."
                    )
                st.session_state["show_solution"] = True

        if not sketch_mode or st.session_state["show_solution"]:
            scene = project(generated)
            st.plotly_chart(
                build_figure(
                    scene,
                    uirevision=f"{config.UI_REVISION}-{generated.expression}",
                    sketch=st.session_state["sketch"] if sketch_mode else None,
                ),
                use_container_width=True,
                config={"displaylogo": False},
            )

st.divider()

st.header("Characteristics")
generated = st.session_state["generated"]
if generated is None:
    st.write("- Nothing generated yet")
elif sketch_mode and not st.session_state["show_solution"]:
    st.write("- Compare your sketch to reveal the solution")
else:
    for line in describe_characteristics(generated):
        st.write(f"- {line}")
