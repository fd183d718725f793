import streamlit as st
import pandas as pd
import plotly.express as px

from components.bench import BenchConfig, run_bench
from components.workload import WorkLoad
from tries.radix_set import RadixSet

# Configure page
st.set_page_config(
    page_title="Radix Set Bench",
    page_icon="🌳",
    layout="wide",
    initial_sidebar_state="expanded"
)

st.title("🌳 Radix Set Bench")
st.markdown("---")

# Sidebar
with st.sidebar:
    st.header("Workload")
    workload = st.selectbox("Key set", WorkLoad.KINDS)
    num_keys = st.slider("Keys", min_value=1_000, max_value=100_000, value=10_000, step=1_000)
    repeats = st.slider("Repeats", min_value=1, max_value=9, value=3)
    prefix_freq = 0.0
    if workload == "words":
        prefix_freq = st.slider("Prefix frequency", min_value=0.0, max_value=1.0, value=0.0, step=0.05)
    seed = st.number_input("Seed", min_value=0, value=42, step=1)

    st.markdown("---")
    run = st.button("▶️ Run benchmark")

if run:
    try:
        config = BenchConfig(
            workload=workload,
            num_keys=num_keys,
            repeats=repeats,
            prefix_freq=prefix_freq,
            seed=int(seed),
        )
        with st.spinner("Running..."):
            st.session_state['results'] = run_bench(config)
    except (ValueError, RuntimeError) as e:
        st.error(f"❌ Benchmark failed: {e}")

if 'results' in st.session_state:
    df: pd.DataFrame = st.session_state['results']

    col1, col2 = st.columns(2)
    with col1:
        st.metric("Nodes", int(df["nodes"].iloc[0]))
    with col2:
        st.metric("Avg. branching factor", f"{df['avg_branch_factor'].iloc[0]:.2f}")

    st.subheader("Throughput by phase")
    fig = px.bar(df, x="phase", y="ops_per_s", color="impl", barmode="group",
                 title="Operations per second (median of repeats)")
    st.plotly_chart(fig, use_container_width=True)

    speedup = df.pivot(index="phase", columns="impl", values="median_s")
    speedup["probe_speedup"] = speedup["ScanRadixSet"] / speedup["RadixSet"]
    st.subheader("Probe vs. scan")
    st.dataframe(speedup)

    st.subheader("Raw results")
    st.dataframe(df, use_container_width=True)

else:
    st.info("👈 Pick a workload and run the benchmark")

    st.subheader("Try it")
    words = st.text_input("Insert words (space separated)", "car cat dog car")
    probe = st.text_input("Query", "car")
    s = RadixSet()
    for w in words.split():
        s.insert(w)
    st.write(f"**{probe!r}** multiplicity: {s.multiplicity(probe)}")
    st.write(f"Nodes: {s.count_nodes()}")
