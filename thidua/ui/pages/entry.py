"""Page de saisie des points."""

import streamlit as st

from thidua.core.errors import EntryValidationError
from thidua.data.store import ScoreStore
from thidua.ui.components.widgets import format_points


class EntryPage:
    """Formulaire de saisie : semaine, classe, ligne du barème."""

    def __init__(self, store: ScoreStore, author: str = ""):
        self.store = store
        self.author = author

    def render(self):
        """Affiche le formulaire et enregistre la saisie."""
        st.subheader("✏️ Saisie des points")
        st.caption("Choisir la semaine, la classe et la faute ou le mérite à enregistrer.")

        if not self.store.weeks or not self.store.classes or not self.store.faults:
            st.warning("Référentiel incomplet : semaines, classes et barème sont requis.")
            return

        faults = {f.id: f for f in self.store.faults}
        week_names = {w.id: w.name for w in self.store.weeks}

        with st.form("entry_form", clear_on_submit=True):
            col1, col2 = st.columns(2)
            week_id = col1.selectbox(
                "Semaine",
                options=[w.id for w in self.store.weeks],
                format_func=week_names.get
            )
            class_id = col2.selectbox(
                "Classe",
                options=[c.id for c in self.store.classes],
                format_func=self.store.class_name
            )
            fault_id = st.selectbox(
                "Faute / Mérite",
                options=list(faults),
                format_func=lambda f: f"{faults[f].name} ({format_points(faults[f].point)})"
            )
            col3, col4 = st.columns([1, 2])
            point = col3.number_input("Points (vide = barème)", value=None, step=0.1)
            note = col4.text_input("Commentaire", placeholder="Ex : Nguyễn Văn A...")

            submitted = st.form_submit_button("Enregistrer", type="primary")

        if submitted:
            try:
                self.store.add_entry(
                    week_id=week_id,
                    class_id=class_id,
                    fault_id=fault_id,
                    point_change=point,
                    note=note or None,
                    created_by=self.author
                )
                st.success("✅ Saisie enregistrée")
            except EntryValidationError as e:
                st.error(f"❌ {e}")
