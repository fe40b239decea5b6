# FILE: pages/1_Self_Test.py
import streamlit as st
from draw_core.validation import run_self_test

st.title("Self-Test")

seed = st.number_input("Seed (0 = random)", min_value=0, max_value=10_000, value=0, step=1)
trials = st.number_input("Uniformity trials", min_value=500, max_value=50_000, value=4000, step=500)

if st.button("Run Self-Test"):
    results = run_self_test(seed=int(seed) or None, trials=int(trials))
    for name, passed in results["tests"]:
        if passed:
            st.success(f"✅ {name}")
        else:
            st.error(f"❌ {name}")

st.write("Use this page to check the shuffle and the draw distribution.")
