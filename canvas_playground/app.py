import logging
import traceback
import numpy as np
import streamlit as st

from .boundary import line_from_angle
from .config import (CANVAS_HEIGHT, CANVAS_WIDTH, MAX_DEGREE, MAX_ITERATIONS, REDRAW_EVERY,
                     ClassifierSettings, RegressionSettings)
from .datasets import DatasetGenerator
from .features import POLYNOMIAL_TERMS
from .playground import ClassifierPlayground, RegressionPlayground
from .transfer import points_from_csv, points_to_csv
from .validation import DataValidator
from .visuals import CanvasFigures

logger = logging.getLogger(__name__)

PAGES = ["📐 Equation of a Line", "📈 Linear Regression", "🎯 Perceptron"]


def _get_playground(key: str, factory):
    if key not in st.session_state:
        st.session_state[key] = factory()
    return st.session_state[key]


def render_line_page():
    """Angle + distance form of a line."""
    st.markdown("### 📐 Equation of a Line")
    st.info("A line can be described using an angle for orientation and a distance from the origin.")

    half_diagonal = int(np.hypot(CANVAS_WIDTH, CANVAS_HEIGHT) / 2)
    col1, col2 = st.columns(2)
    with col1:
        angle = st.slider("Angle", 0, 360, 45, help="Orientation of the line's normal, in degrees")
    with col2:
        distance = st.slider("Distance", -half_diagonal, half_diagonal, 150,
                             help="Signed distance of the line from the center")

    center = (CANVAS_WIDTH / 2, CANVAS_HEIGHT / 2)
    line = line_from_angle(angle, distance, center, float(np.hypot(CANVAS_WIDTH, CANVAS_HEIGHT)))
    st.plotly_chart(CanvasFigures.create_line_canvas(line, center), use_container_width=True)
    st.caption(f"{angle} degrees, {distance} pixels from the center")


def _point_controls(playground, with_labels: bool):
    """Add, load, upload, download and reset points."""
    with st.expander("➕ Add points", expanded=len(playground) == 0):
        with st.form(f"add_point_{with_labels}", clear_on_submit=False):
            cols = st.columns(3 if with_labels else 2)
            x = cols[0].number_input("x", 0.0, float(CANVAS_WIDTH), CANVAS_WIDTH / 2)
            y = cols[1].number_input("y", 0.0, float(CANVAS_HEIGHT), CANVAS_HEIGHT / 2)
            label = cols[2].radio("Class", [1, -1], horizontal=True) if with_labels else None
            if st.form_submit_button("Add point"):
                if with_labels:
                    playground.add_point(x, y, label)
                else:
                    playground.add_point(x, y)

        col1, col2 = st.columns([2, 1])
        with col1:
            options = (["Two clusters", "Ring"] if with_labels
                       else ["Linear relationship", "Parabola"])
            sample = st.selectbox("Sample points", options)
        with col2:
            seed = st.number_input("Random seed", 0, 1000, 42)

        if st.button("📚 Load sample points"):
            playground.reset()
            if with_labels:
                if sample == "Ring":
                    points, labels = DatasetGenerator.generate_ring(seed=seed)
                else:
                    points, labels = DatasetGenerator.generate_blobs(seed=seed)
                for (px, py), lab in zip(points, labels):
                    playground.add_point(px, py, int(lab))
            else:
                if sample == "Parabola":
                    points = DatasetGenerator.generate_polynomial(seed=seed)
                else:
                    points = DatasetGenerator.generate_linear(seed=seed)
                for px, py in points:
                    playground.add_point(px, py)

        uploaded_file = st.file_uploader(
            "Upload points (CSV)",
            type=['csv'],
            help="Columns x, y" + (", label (+1/-1)" if with_labels else "")
        )
        if uploaded_file is not None and st.button("📁 Use uploaded points"):
            try:
                points, labels = points_from_csv(uploaded_file, with_labels=with_labels)
                playground.reset()
                for i, (px, py) in enumerate(points):
                    if with_labels:
                        playground.add_point(px, py, int(labels[i]))
                    else:
                        playground.add_point(px, py)
                st.success(f"✅ Loaded {len(points)} points")
            except ValueError as e:
                st.error(f"Error loading points: {e}")

    col1, col2 = st.columns(2)
    with col1:
        if st.button("🔄 Reset"):
            playground.reset()
    with col2:
        labels = playground.labels if with_labels else None
        st.download_button("💾 Download points", points_to_csv(playground.points, labels),
                           file_name="points.csv", mime="text/csv")


def _animate(playground, draw):
    """Tick the playground until its run ends, redrawing every few iterations."""
    progress_bar = st.progress(0.0)
    status_text = st.empty()
    canvas_plot = st.empty()
    cost_plot = st.empty()

    session = playground.session
    while playground.running:
        frame = playground.tick()
        iteration = session.iterations - frame.iterations_left

        if session.diverged:
            playground.stop()
            st.warning("⚠️ Training diverged due to numerical instability. Try reducing the learning rate.")

        if iteration % REDRAW_EVERY == 0 or not playground.running:
            progress_bar.progress(min(1.0, iteration / session.iterations))
            status_text.text(f"Iteration {iteration}: Cost = {frame.cost:.6f}")
            canvas_plot.plotly_chart(draw(frame), use_container_width=True)
            cost_plot.plotly_chart(CanvasFigures.create_cost_figure(session.cost_history),
                                   use_container_width=True)

    if session.last_cost is not None and not session.diverged:
        status_text.success(f"✅ Training finished. Final cost: {session.last_cost:.6f}")


def render_regression_page():
    st.markdown("### 📈 Linear Regression")
    playground = _get_playground('regression_playground', RegressionPlayground)

    with st.sidebar:
        st.markdown("#### ⚙️ Regression Parameters")
        iterations = st.number_input("Iterations", 1, MAX_ITERATIONS, 10000, step=100)
        learning_rate = st.number_input("Learning Rate", 1e-6, 10.0, 0.1, format="%.4f",
                                        help="🎯 Higher = faster learning, but might overshoot!")
        degree = st.number_input("Degree", 0, MAX_DEGREE, 1,
                                 help="Highest power of x in the fitted polynomial")
    settings = RegressionSettings(iterations=iterations, learning_rate=learning_rate, degree=degree)

    _point_controls(playground, with_labels=False)

    col1, col2 = st.columns(2)
    with col1:
        solve = st.button("🚀 Solve", type="primary")
    with col2:
        if st.button("⏹️ Stop"):
            playground.stop()

    def draw(frame):
        return CanvasFigures.create_regression_canvas(playground.points, frame.curve, frame.iterations_left)

    if solve:
        is_valid, message = DataValidator.validate_regression(playground.points)
        if not is_valid:
            st.error(message)
            return
        playground.start(settings)
        _animate(playground, draw)
    elif playground.session is not None:
        curve = playground.curve(playground.session.coefficients)
        st.plotly_chart(CanvasFigures.create_regression_canvas(
            playground.points, curve, playground.session.iterations_left), use_container_width=True)
    else:
        st.plotly_chart(CanvasFigures.create_regression_canvas(playground.points), use_container_width=True)


def render_perceptron_page():
    st.markdown("### 🎯 Perceptron")
    playground = _get_playground('classifier_playground', ClassifierPlayground)

    with st.sidebar:
        st.markdown("#### ⚙️ Perceptron Parameters")
        iterations = st.number_input("Iterations", 1, MAX_ITERATIONS, 10000, step=100)
        learning_rate = st.number_input("Learning Rate", 1e-6, 10.0, 0.001, format="%.4f")
        margin = st.number_input("Margin", 0.0, 10.0, 0.1, format="%.3f",
                                 help="Points scoring inside the margin count as misclassified")
        terms = [term for term in POLYNOMIAL_TERMS if st.checkbox(term, value=False)]
    settings = ClassifierSettings(iterations=iterations, learning_rate=learning_rate,
                                  margin=margin, terms=tuple(terms))

    _point_controls(playground, with_labels=True)

    col1, col2 = st.columns(2)
    with col1:
        solve = st.button("🚀 Solve", type="primary")
    with col2:
        if st.button("⏹️ Stop"):
            playground.stop()

    def draw(frame):
        return CanvasFigures.create_classifier_canvas(
            playground.points, playground.labels, frame.curves, frame.iterations_left)

    if solve:
        is_valid, message = DataValidator.validate_classifier(playground.points, playground.labels)
        if not is_valid:
            st.error(message)
            return
        playground.start(settings)
        _animate(playground, draw)
        st.metric("Training accuracy", f"{playground.accuracy():.1%}")
    elif playground.session is not None:
        curves = playground.boundary(playground.session.coefficients)
        st.plotly_chart(CanvasFigures.create_classifier_canvas(
            playground.points, playground.labels, curves, playground.session.iterations_left),
            use_container_width=True)
    else:
        st.plotly_chart(CanvasFigures.create_classifier_canvas(playground.points, playground.labels),
                        use_container_width=True)


def main():
    """Main application entry point with error handling."""
    st.set_page_config(
        page_title="Canvas Playground",
        page_icon="🎯",
        layout="wide",
        initial_sidebar_state="expanded"
    )
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")

    try:
        st.title("Machine Learning from Scratch")
        with st.sidebar:
            page = st.radio("Lesson", PAGES, index=1)

        if page == PAGES[0]:
            render_line_page()
        elif page == PAGES[1]:
            render_regression_page()
        else:
            render_perceptron_page()

    except Exception as e:
        logger.exception("Unexpected error while rendering the page")
        st.error(f"An unexpected error occurred: {e}")
        st.info("Please refresh the page and try again. If the problem persists, reset the points.")

        with st.expander("🔧 Error Details (for debugging)"):
            st.code(traceback.format_exc())
