"""
Recipe form widgets shared by the add and edit pages.

Widget values are written straight back into the editor's RecipeForm; the
editor validates on submit, so nothing is checked here.
"""

import streamlit as st

from recipeshare.editor import RecipeEditor
from utils.api_client import run
from ui.feedback import show_error


def _render_rows(rows: list, label: str, key: str, remove) -> None:
    """Render one text input per row with a remove button; edits update `rows` in place."""
    for index in range(len(rows)):
        col_value, col_remove = st.columns([6, 1])
        with col_value:
            rows[index] = st.text_input(f"{label} {index + 1}", value=rows[index], key=f"{key}_{index}")
        with col_remove:
            st.write("")
            if st.button("✕", key=f"{key}_remove_{index}", disabled=len(rows) == 1):
                remove(index)
                st.rerun()


def render_recipe_form(editor: RecipeEditor, submit_label: str, key_prefix: str) -> None:
    """
    Render the recipe form for an editor and submit it on request.

    Args:
        editor: Controller owning the form values
        submit_label: Text of the submit button
        key_prefix: Prefix keeping widget keys unique per page/recipe
    """
    form = editor.form
    show_error(editor.error)

    form.title = st.text_input("Title", value=form.title, key=f"{key_prefix}_title")
    form.description = st.text_area("Description", value=form.description, key=f"{key_prefix}_description")

    col_time, col_servings = st.columns(2)
    with col_time:
        form.cooking_time = st.text_input(
            "Cooking Time (minutes)", value=str(form.cooking_time), key=f"{key_prefix}_cooking_time"
        )
    with col_servings:
        form.servings = st.text_input("Servings", value=str(form.servings), key=f"{key_prefix}_servings")

    st.markdown("### Ingredients")
    _render_rows(form.ingredients, "Ingredient", f"{key_prefix}_ingredient", form.remove_ingredient)
    if st.button("Add Ingredient", key=f"{key_prefix}_add_ingredient"):
        form.add_ingredient()
        st.rerun()

    st.markdown("### Instructions")
    _render_rows(form.instructions, "Step", f"{key_prefix}_instruction", form.remove_instruction)
    if st.button("Add Step", key=f"{key_prefix}_add_instruction"):
        form.add_instruction()
        st.rerun()

    st.divider()
    if st.button(submit_label, type="primary", use_container_width=True, key=f"{key_prefix}_submit"):
        run(editor.submit())
        st.rerun()
