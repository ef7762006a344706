"""Operator-facing prompts and indicators (console stand-ins for the page overlays)"""


class Notifier:
    def __init__(self):
        self.running_indicator = False
        self.blocked_prompt = False
        self.alerts = []

    def show_running_indicator(self):
        if not self.running_indicator:
            print("▶️  Auto-apply running")
        self.running_indicator = True

    def hide_running_indicator(self):
        if self.running_indicator:
            print("⏹️  Auto-apply stopped")
        self.running_indicator = False

    def hide_blocked_prompt(self):
        self.blocked_prompt = False

    def alert(self, message):
        """Blocking prompt that needs operator attention"""
        self.blocked_prompt = True
        self.alerts.append(message)
        print("\n" + "=" * 60)
        print(f"⏸️  {message}")
        print("=" * 60 + "\n")
