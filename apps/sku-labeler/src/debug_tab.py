import streamlit as st
from datetime import datetime


class DebugTab:
    def __init__(self, max_entries=100):
        self.max_entries = max_entries
        # Initialize session state for logs if not exists
        if 'debug_logs' not in st.session_state:
            st.session_state.debug_logs = []

    def add_log(self, category, message, data=None):
        """Add a log entry to the debug tab"""
        timestamp = datetime.now().strftime("%H:%M:%S.%f")[:-3]
        log_entry = {
            'timestamp': timestamp,
            'category': category,
            'message': message,
            'data': data
        }
        st.session_state.debug_logs.append(log_entry)
        # Keep only the newest entries
        if len(st.session_state.debug_logs) > self.max_entries:
            st.session_state.debug_logs.pop(0)

    def render(self):
        st.header("🔧 Activity Log")

        if not st.session_state.debug_logs:
            st.info("No activity yet. Generated SKUs and printed labels will appear here.")
            return

        # Display logs in reverse chronological order
        for log in reversed(st.session_state.debug_logs):
            with st.container():
                col1, col2 = st.columns([1, 4])
                with col1:
                    st.code(log['timestamp'])
                with col2:
                    st.write(f"**{log['category']}**: {log['message']}")

                if log['data']:
                    with st.expander("View Details"):
                        st.json(log['data'])

                st.divider()

        if st.button("Clear Logs", key="clear_logs"):
            st.session_state.debug_logs = []
            st.rerun()
