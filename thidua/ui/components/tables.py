"""Composants de tableaux de données."""

import streamlit as st
import pandas as pd
from typing import Optional


class DataTable:
    """Tableau de données configurable."""

    def __init__(
        self,
        data: pd.DataFrame,
        title: Optional[str] = None,
        height: int = 400,
        use_container_width: bool = True
    ):
        self.data = data
        self.title = title
        self.height = height
        self.use_container_width = use_container_width

    def render(self):
        if self.title:
            st.subheader(self.title)

        st.dataframe(
            self.data,
            use_container_width=self.use_container_width,
            height=self.height
        )


class RankingTable:
    """Tableau de classement avec médailles pour le podium."""

    MEDALS = {1: "🥇", 2: "🥈", 3: "🥉"}

    DISPLAY_COLUMNS = {
        'rank': 'Rang',
        'class_name': 'Classe',
        'base': 'Départ',
        'plus': 'Points +',
        'minus': 'Points -',
        'total': 'Total',
    }

    def __init__(self, data: pd.DataFrame, title: str = "Classement"):
        self.data = data
        self.title = title

    def format(self) -> pd.DataFrame:
        """Colonnes renommées et arrondies pour l'affichage."""
        df = self.data[list(self.DISPLAY_COLUMNS)].rename(columns=self.DISPLAY_COLUMNS)
        df['Rang'] = df['Rang'].map(lambda r: f"{self.MEDALS.get(r, '')} {r}".strip())
        for col in ('Points +', 'Points -', 'Total'):
            df[col] = df[col].round(2)
        return df

    def render(self):
        if self.data.empty:
            st.info("Aucune classe dans le référentiel")
            return

        st.subheader(self.title)
        st.dataframe(self.format(), use_container_width=True, hide_index=True)
