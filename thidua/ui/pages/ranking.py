"""Page de classement des classes."""

import streamlit as st

from thidua.data.store import ScoreStore
from thidua.data.transformers import DataTransformer
from thidua.ui.components.charts import BarChart
from thidua.ui.components.tables import DataTable, RankingTable

ALL_WEEKS = "__all__"


class RankingPage:
    """Tableau de classement, global ou restreint à une semaine."""

    def __init__(self, store: ScoreStore):
        self.store = store

    def render(self):
        """Affiche la page complète."""
        st.subheader("🏆 Classement")

        options = [ALL_WEEKS] + [w.id for w in self.store.weeks]
        week_names = {w.id: w.name for w in self.store.weeks}
        selected = st.selectbox(
            "Période",
            options=options,
            format_func=lambda w: "Toutes les semaines" if w == ALL_WEEKS else week_names[w],
            key="ranking_week_select"
        )

        rows = self.store.rankings(None if selected == ALL_WEEKS else [selected])
        df = DataTransformer.rankings_to_frame(rows, base_score=self.store.config.base_score)

        RankingTable(df).render()

        if not df.empty:
            BarChart(
                labels=df['class_name'],
                plus=df['plus'],
                minus=df['minus'],
                title="Points gagnés et perdus"
            ).render()

        with st.expander("Détail par semaine"):
            deltas = DataTransformer.weekly_deltas(self.store.entries, self.store.weeks)
            week_names = {w.id: w.name for w in self.store.weeks}
            DataTable(
                deltas.rename(index=week_names, columns=self.store.class_name),
                height=250
            ).render()
