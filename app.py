import streamlit as st

from components import cleaner

# Set up page configuration (title, icon, layout, etc.)
st.set_page_config(
    page_title="Plain Text Cleaner",
    page_icon="🧹",
    layout="centered",
)

cleaner.run_cleaner()
