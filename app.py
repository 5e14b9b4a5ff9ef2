"""
Cache Replacement Simulator — Clock, LRU & MRU

This application provides an interactive, step-by-step visualization of
classic cache/page replacement algorithms:
    - Clock (Second Chance) with use bits and a circular pointer
    - LRU (Least Recently Used)
    - MRU (Most Recently Used)

The whole trace is computed up front by the engine; this module only
renders it and lets the user step back and forth through it.

Built with Streamlit for the web interface and Plotly for visualizations.
"""

# =============================================================================
# IMPORTS
# =============================================================================

import streamlit as st                       # Web application framework
import plotly.graph_objects as go            # Interactive plotting library

from engine import ReplacementPolicy, format_hit_rate, get_stats, run_simulation
from validation import MAX_CACHE_SIZE, MAX_PAGE_REQUESTS, SimulationError
from utils import (
    build_display_cache,
    describe_cache,
    get_color,
    next_step_index,
    prev_step_index,
)

DEFAULT_CACHE_SIZE = 4
DEFAULT_SEQUENCE = "A P R O P E R C O P P E R C O F F E E P O T"


# =============================================================================
# SESSION STATE HELPERS
# =============================================================================

def clear_simulation():
    """Drop the current trace and rewind to step 0."""
    st.session_state.steps = []
    st.session_state.step_index = 0
    st.session_state.run_cache_size = DEFAULT_CACHE_SIZE


def on_algorithm_change():
    """A new algorithm invalidates the trace computed for the previous one."""
    clear_simulation()
    st.session_state.error = ""


# Navigation runs as on_click callbacks so the buttons are drawn from the new index
def on_prev_step():
    st.session_state.step_index = prev_step_index(st.session_state.step_index)


def on_go_to_start():
    st.session_state.step_index = 0


def on_next_step():
    st.session_state.step_index = next_step_index(
        st.session_state.step_index, len(st.session_state.steps)
    )


# =============================================================================
# STREAMLIT UI - Web Application Interface
# =============================================================================

st.set_page_config(page_title="Cache Replacement Simulator", layout="wide")

# Trace and navigation persist across Streamlit reruns
if "steps" not in st.session_state:
    clear_simulation()
if "error" not in st.session_state:
    st.session_state.error = ""

page = st.sidebar.radio("Choose View", ["Simulator", "Concepts"])

st.title("Cache Replacement Simulator")

# =============================================================================
# CONCEPTS PAGE - Educational Content
# =============================================================================

if page == "Concepts":
    st.header("Replacement Algorithms Used in This Project")
    st.markdown(
        """
        ## 📘 Key Concepts

        ### **1. Hit / Miss**
        - A **hit** means the requested page is already in the cache.
        - A **miss** means it is not, and it must be loaded into a frame.

        ### **2. Clock (Second Chance)**
        - Frames form a circle scanned by a **pointer**.
        - Each frame has a **use bit**, set to 1 whenever the page is loaded or hit.
        - On a miss the pointer advances: a frame with use bit 1 gets a
          *second chance* (bit cleared to 0), the first empty frame or frame
          with use bit 0 receives the new page.

        ### **3. LRU (Least Recently Used)**
        - Pages are kept ordered by last use.
        - A hit moves the page to the most recently used end.
        - A miss on a full cache evicts the **least** recently used page.

        ### **4. MRU (Most Recently Used)**
        - Same ordering as LRU.
        - A miss on a full cache evicts the **most** recently used page,
          which suits cyclic scans larger than the cache.

        ---
        ### ✔ Use the Simulator view to step through each algorithm request by request.
        """
    )
    st.stop()

# =============================================================================
# SIMULATOR PAGE - Main Interactive Interface
# =============================================================================

# -----------------------------------------------------------------------------
# SIDEBAR - Simulation Settings
# -----------------------------------------------------------------------------

st.sidebar.header("Simulation Settings")

algorithm = st.sidebar.selectbox(
    "Algorithm",
    key="algorithm",
    options=list(ReplacementPolicy.ALL),
    index=0,  # Default: Clock
    on_change=on_algorithm_change,
)

# Bounds are checked by the engine so that out-of-range input is reported
cache_size = st.sidebar.number_input(
    f"Cache size (1-{MAX_CACHE_SIZE})",
    key="cache_size",
    value=DEFAULT_CACHE_SIZE,
    step=1,
)

page_string = st.sidebar.text_input(
    f"Page request sequence (comma, semicolon or space separated, max {MAX_PAGE_REQUESTS})",
    key="page_string",
    value=DEFAULT_SEQUENCE,
    placeholder="e.g., A, B, C, D, A, B, E",
)

if st.sidebar.button(f"Simulate {algorithm}", key="simulate"):
    st.session_state.error = ""
    try:
        st.session_state.steps = run_simulation(algorithm, int(cache_size), page_string)
        st.session_state.step_index = 0
        st.session_state.run_cache_size = int(cache_size)
    except SimulationError as e:
        clear_simulation()
        st.session_state.error = str(e)

if st.session_state.error:
    st.sidebar.error(st.session_state.error)

steps = st.session_state.steps

if steps:
    # -------------------------------------------------------------------------
    # STEP NAVIGATION
    # -------------------------------------------------------------------------
    nav_prev, nav_start, nav_next = st.columns(3)
    nav_prev.button(
        "Previous Step",
        key="prev_step",
        on_click=on_prev_step,
        disabled=st.session_state.step_index == 0,
    )
    nav_start.button("Go to Start", key="go_to_start", on_click=on_go_to_start)
    nav_next.button(
        "Next Step",
        key="next_step",
        on_click=on_next_step,
        disabled=st.session_state.step_index >= len(steps) - 1,
    )

    step_index = st.session_state.step_index
    step = steps[step_index]
    frame_count = st.session_state.run_cache_size
else:
    # Empty frames for the size currently entered, before the first run
    st.info("Select algorithm, enter settings and click Simulate.")
    step_index = 0
    step = None
    frame_count = max(0, min(int(cache_size), MAX_CACHE_SIZE))

col1, col2 = st.columns([1, 2])

# -----------------------------------------------------------------------------
# LEFT COLUMN - Current Action and Event Log
# -----------------------------------------------------------------------------

with col1:
    st.subheader("Current Action")
    if step is None:
        st.write("Page Requested: **N/A**")
    else:
        requested = f'"{step.page_requested}"' if step.page_requested is not None else "N/A"
        st.write(f"Page Requested: **{requested}**")
        st.write(f"Action: {step.action_description}")
        if step.hit:
            st.success("Hit")
        if step.miss:
            st.error("Miss/Fault")
        if step.replaced_page is not None:
            st.warning(f'Replaced: "{step.replaced_page}"')

    # Most recent events first, up to the current step
    st.subheader("Event Log")
    for s in steps[:step_index + 1][::-1]:
        st.write(s.action_description)

# -----------------------------------------------------------------------------
# RIGHT COLUMN - Visualizations
# -----------------------------------------------------------------------------

with col2:
    # ----- Cache Frames Visualization -----
    if steps:
        st.subheader(f"{algorithm} Cache State (Step {step_index}/{len(steps) - 1})")
    else:
        st.subheader(f"{algorithm} Cache State")
    st.caption(describe_cache(algorithm))

    slots = build_display_cache(step, algorithm, frame_count)

    fig = go.Figure()

    x = []        # Slot positions
    y = []        # Bar heights (all 1 for uniform display)
    text = []     # Labels for each slot
    colors = []   # Fill colors
    outlines = [] # Pointer frame gets a thick outline

    for i, slot in enumerate(slots):
        page_label = slot["page"] if slot["page"] is not None else "-"
        if algorithm == ReplacementPolicy.CLOCK:
            bit = slot["use_bit"] if slot["page"] is not None else "-"
            label = f"Frame {i}: {page_label} (R={bit})"
            if slot["is_pointer"]:
                label += " ◀ pointer"
        else:
            label = f"Idx {slot['order_index']}: {page_label}"
        text.append(label)
        colors.append(get_color(slot["page"], slot["use_bit"]))
        outlines.append(4 if slot["is_pointer"] else 1)
        x.append(i)
        y.append(1)

    fig.add_trace(go.Bar(
        x=x,
        y=y,
        text=text,
        marker_color=colors,
        marker_line_color="royalblue",
        marker_line_width=outlines,
        hovertext=text,
        hoverinfo="text",
    ))
    fig.update_layout(
        height=180,
        showlegend=False,
        yaxis=dict(showticklabels=False),
    )
    st.plotly_chart(fig, use_container_width=True)

    # ----- Statistics Display -----
    st.subheader("Statistics")
    stats = get_stats(step)

    m1, m2, m3 = st.columns(3)
    m1.metric("Hits", stats["hits"])
    m2.metric("Misses", stats["misses"])
    m3.metric("Hit Rate", format_hit_rate(step))

    # ----- Hits vs Misses Bar Chart -----
    fig2 = go.Figure()
    fig2.add_trace(go.Bar(
        x=["Hits", "Misses"],
        y=[stats["hits"], stats["misses"]],
    ))
    fig2.update_layout(height=300, title="Hits vs Misses")
    st.plotly_chart(fig2, use_container_width=True)

# =============================================================================
# FOOTER - Usage Tips and Examples
# =============================================================================

st.markdown("---")
st.markdown(
    "**Instructor examples**:\n"
    "1) LRU demo: cache size 2, sequence `A,B,A,C` ends with `[A, C]`.\n"
    "2) MRU demo: same input ends with `[B, C]` because `A` is evicted as the current MRU.\n"
    "3) Clock demo: cache size 3, sequence `A B C A D` shows a full second-chance sweep."
)
