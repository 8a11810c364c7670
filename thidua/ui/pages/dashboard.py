"""Page d'accueil : chiffres clés, podium et courbe des classes de tête."""

import streamlit as st

from thidua.data.store import ScoreStore
from thidua.data.transformers import DataTransformer
from thidua.ui.components.charts import TrendChart
from thidua.ui.components.tables import DataTable
from thidua.ui.components.widgets import MetricCard, PointBadge


class DashboardPage:
    """Vue d'ensemble de l'émulation."""

    def __init__(self, store: ScoreStore):
        self.store = store
        self.rankings = store.rankings()

    def render(self):
        """Affiche la page complète."""
        col1, col2 = st.columns(2)
        with col1:
            MetricCard("Classes participantes", str(len(self.rankings))).render()
        with col2:
            MetricCard("Saisies enregistrées", str(len(self.store.entries))).render()

        st.divider()

        st.subheader(f"📈 Évolution (Top {self.store.config.top_n})")
        points = self.store.trend()
        TrendChart(points, title="Total cumulé par semaine").render()
        with st.expander("Valeurs"):
            DataTable(DataTransformer.series_to_frame(points), height=200).render()

        st.divider()

        col_top, col_recent = st.columns(2)

        with col_top:
            st.subheader("🏆 Podium")
            for row in self.rankings[:3]:
                st.write(f"**{row.rank}.** Classe {row.class_model.name} : {row.total:g} pts")

        with col_recent:
            st.subheader("🗓️ Saisies récentes")
            recent = self.store.recent_entries(3)
            if not recent:
                st.caption("Aucune saisie pour le moment.")
            for entry in recent:
                st.write(
                    f"Classe {self.store.class_name(entry.class_id)} : "
                    f"{PointBadge(entry.point_change).render()}"
                )
                if entry.note:
                    st.caption(entry.note)
