import logging

import streamlit as st
import pandas as pd
import plotly.express as px

from arrays.permutations import permutations
from arrays.prefix_sum import PrefixSum
from tries.standard_trie import Trie
from workloads.bench import BenchConfig, run_benchmarks

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
log = logging.getLogger("prefix_bench")

DEMO_WORDS = ["Swift", "Apple", "iPhone", "iPad", "iMac", "AppleWatch"]

# Configure page
st.set_page_config(
    page_title="Prefix Structures Bench",
    page_icon="🌳",
    layout="wide",
    initial_sidebar_state="expanded"
)

# Main title
st.title("🌳 Prefix Structures Bench")
st.markdown("---")


def _parse_words(text):
    return [w for w in text.splitlines() if w]


if "trie" not in st.session_state:
    st.session_state["trie"] = Trie(DEMO_WORDS)

# Sidebar
with st.sidebar:
    st.header("Navigation")
    page = st.selectbox(
        "Choose a section:",
        ["Trie Explorer", "Array Tools", "Benchmarks"]
    )

    st.markdown("---")
    st.subheader("Quick Actions")
    if st.button("🔄 Reset Trie"):
        st.session_state["trie"] = Trie(DEMO_WORDS)
        log.info("Trie reset to %d demo words", len(DEMO_WORDS))
        st.rerun()

trie = st.session_state["trie"]

# Main content area
if page == "Trie Explorer":
    st.header("🔤 Trie Explorer")

    col1, col2, col3 = st.columns(3)
    with col1:
        st.metric("Words", len(trie))
    with col2:
        st.metric("Nodes", trie.count_nodes())
    with col3:
        st.metric("Avg Branching", f"{trie.count_nodes(get_avg_branch_factor=True):.2f}")

    tab1, tab2, tab3 = st.tabs(["Insert / Delete", "Lookup", "All Words"])

    with tab1:
        text = st.text_area("One word per line", key="edit_words")
        words = _parse_words(text)
        c1, c2 = st.columns(2)
        with c1:
            if st.button("➕ Insert", disabled=not words):
                trie.batch_insert(words)
                st.success(f"✅ Inserted {len(words)} word(s)")
        with c2:
            if st.button("➖ Delete", disabled=not words):
                outcome = trie.batch_delete(words)
                st.dataframe(pd.DataFrame(
                    {"word": list(outcome), "deleted": list(outcome.values())}
                ))

    with tab2:
        probe = st.text_input("Word or prefix")
        if probe:
            st.write(f"**contains:** {trie.contains(probe)}")
            matches = list(trie.enumerate_prefix(probe, k=50))
            st.write(f"**Words starting with '{probe}'** (first 50):")
            st.write(sorted(matches) if matches else "none")

    with tab3:
        st.dataframe(pd.DataFrame({"word": sorted(trie.get_all_words())}), use_container_width=True)

elif page == "Array Tools":
    st.header("🔢 Array Tools")

    tab1, tab2 = st.tabs(["Prefix Sum", "Permutations"])

    with tab1:
        raw = st.text_input("Numbers (comma separated)", "8, 3, 4, 2, 6, 7")
        try:
            values = [int(x) for x in raw.split(",") if x.strip()]
        except ValueError as e:
            st.error(f"❌ Could not parse numbers: {e}")
            values = []
        if values:
            ps = PrefixSum(values)
            st.dataframe(pd.DataFrame({"value": ps.array, "prefix_sum": ps.prefix_sum}))
            c1, c2 = st.columns(2)
            with c1:
                start = st.number_input("start", value=0, step=1)
                end = st.number_input("end", value=len(values) - 1, step=1)
                total = ps.get_sum(int(start), int(end))
                st.write("**Range sum:**", "invalid range" if total is None else total)
            with c2:
                target = st.number_input("target sum", value=9, step=1)
                st.write("**Contiguous subarray exists:**", ps.contains_sum(int(target)))

    with tab2:
        items = st.text_input("Items (comma separated)", "1, 2, 3, 4")
        data = [x.strip() for x in items.split(",") if x.strip()]
        count = st.number_input("Length", value=min(2, len(data)), step=1)
        result = permutations(data, int(count))
        if result is None:
            st.warning("⚠️ Length must be between 0 and the number of items")
        else:
            st.write(f"**{len(result)} permutations**")
            st.dataframe(pd.DataFrame(result))

elif page == "Benchmarks":
    st.header("⏱️ Benchmarks")

    with st.expander("Configuration", expanded=True):
        c1, c2, c3 = st.columns(3)
        with c1:
            num_words = st.number_input("Words", min_value=1, value=5_000, step=1_000)
            prefix_freq = st.slider("Prefix frequency", 0.0, 1.0, 0.0)
        with c2:
            array_size = st.number_input("Array size", min_value=1, value=10_000, step=1_000)
            repeats = st.number_input("Repeats", min_value=1, value=3, step=1)
        with c3:
            perm_items = st.number_input("Permutation items", min_value=0, value=6, step=1)
            perm_count = st.number_input("Permutation length", min_value=0, value=3, step=1)
            seed = st.number_input("Seed", min_value=0, value=42, step=1)

    if st.button("▶️ Run"):
        try:
            cfg = BenchConfig(
                num_words=int(num_words),
                prefix_freq=float(prefix_freq),
                array_size=int(array_size),
                perm_items=int(perm_items),
                perm_count=int(perm_count),
                repeats=int(repeats),
                seed=int(seed),
            )
        except ValueError as e:
            st.error(f"❌ {e}")
        else:
            with st.spinner("Running benchmarks..."):
                st.session_state["bench"] = run_benchmarks(cfg)

    if "bench" in st.session_state:
        df = st.session_state["bench"].copy()
        df["ms"] = df["seconds"] * 1_000
        st.dataframe(df, use_container_width=True)
        fig = px.bar(df, x="operation", y="ms", color="structure",
                     title="Best run time per operation (ms)")
        st.plotly_chart(fig, use_container_width=True)
    else:
        st.info("👆 Configure and run a benchmark to see results")

# Footer
st.markdown("---")
st.markdown(
    """
    <div style='text-align: center; color: #B0B0B0; padding: 1rem;'>
        Built with Streamlit 🚀 | Prefix Structures Bench
    </div>
    """,
    unsafe_allow_html=True
)
