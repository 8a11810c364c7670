"""Application principale Streamlit."""

import os

import streamlit as st

from thidua.config import load_scoring_config, setup_logger
from thidua.core.errors import EntryValidationError, RosterError
from thidua.data.loaders import EntriesCSVLoader, RosterLoader
from thidua.data.store import ScoreStore

# Configuration de la page
st.set_page_config(
    page_title="ThiDua – Émulation scolaire",
    page_icon="🏆",
    layout="wide"
)

logger = setup_logger()


def init_store() -> ScoreStore:
    """Crée l'état de la session à partir du référentiel et de la configuration."""
    roster = RosterLoader().load()
    config = load_scoring_config()
    logger.info("Session initialisée (score de départ %s, top %d)", config.base_score, config.top_n)
    return ScoreStore(roster, config)


def sidebar(store: ScoreStore) -> str:
    """Affiche la sidebar et retourne l'auteur des saisies."""
    st.sidebar.title("🏆 ThiDua")
    if store.active_year:
        st.sidebar.caption(f"Année scolaire {store.active_year}")
    st.sidebar.divider()

    author = st.sidebar.text_input("Auteur des saisies", key="author_input")

    # Import d'un journal existant
    uploaded = st.sidebar.file_uploader("Importer des saisies (CSV ;)", type="csv")
    if uploaded is not None and st.sidebar.button("📥 Importer", type="primary"):
        try:
            entries = EntriesCSVLoader(uploaded).load()
            store.extend(entries)
            st.sidebar.success(f"✅ {len(entries)} saisies importées")
        except (EntryValidationError, RosterError, ValueError) as e:
            st.sidebar.error(f"❌ Erreur: {e}")

    if st.sidebar.button("🗑️ Réinitialiser", type="secondary"):
        del st.session_state["store"]
        st.rerun()

    return author


def main():
    """Point d'entrée principal."""
    if "store" not in st.session_state:
        try:
            st.session_state["store"] = init_store()
        except (RosterError, ValueError) as e:
            st.title("🏆 ThiDua")
            st.error(f"❌ Configuration invalide: {e}")
            return

    store: ScoreStore = st.session_state["store"]
    author = sidebar(store)

    st.title(f"🏆 Émulation – {len(store.classes)} classes, {len(store.weeks)} semaines")

    from thidua.ui.pages.dashboard import DashboardPage
    from thidua.ui.pages.entry import EntryPage
    from thidua.ui.pages.ranking import RankingPage

    tab1, tab2, tab3 = st.tabs(["📊 Tableau de bord", "✏️ Saisie", "🏆 Classement"])

    with tab1:
        DashboardPage(store).render()

    with tab2:
        EntryPage(store, author=author or os.getenv('THIDUA_AUTHOR', '')).render()

    with tab3:
        RankingPage(store).render()


if __name__ == "__main__":
    main()
