"""CSS styles for the TUI.

Hides layout and styling decisions from the application logic.
Uses Textual CSS features: nesting, pseudo-classes, variables.
"""

APP_CSS = """
/* ============================================
   Main Screen Layout - transcript over input
   ============================================ */
Screen {
    layout: vertical;
    background: $background;
}

/* ============================================
   Chat History Panel
   ============================================ */
#chat-history {
    height: 1fr;
    background: $panel;
    border: round $primary 60%;
    border-title-color: $primary;
    border-title-style: bold;
    border-title-align: left;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    padding: 0 1;
    scrollbar-gutter: stable;

    &:focus-within {
        border: round $primary;
    }
}

/* ============================================
   Chat Turns
   ============================================ */
.chat-turn {
    height: auto;
    margin: 1 0 0 0;
    padding: 0 1;
}

.user-turn {
    margin-left: 8;
    border-left: thick $primary;
    background: $primary 10%;
}

.assistant-turn {
    margin-right: 8;
    border-left: thick $secondary;
    background: $surface;
}

.turn-header {
    color: $text-muted;
    text-style: bold;
}

.turn-content {
    height: auto;
}

/* ============================================
   Debug/Log Panel
   ============================================ */
#debug-panel {
    height: auto;
    min-height: 6;
    max-height: 12;
    background: $panel;
    border: round $warning 60%;
    border-title-color: $warning;
    border-title-style: bold;
    border-title-align: left;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    padding: 0 1;
    overflow-y: scroll;
    overflow-x: auto;
    scrollbar-gutter: stable;
}

/* ============================================
   Chat Input Bar - Text Entry + Send
   ============================================ */
ChatInputBar {
    height: 5;
    padding: 1 0 0 0;
}

#chat-input {
    width: 1fr;
    border: round $primary 60%;

    &:focus {
        border: round $primary;
    }
}

#send-btn {
    width: 12;
    margin-left: 1;
}
"""
