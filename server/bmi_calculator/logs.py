import datetime
from pathlib import Path

class Logs:
    def __init__(self, log_file="app.log"):
        self.log_file = Path(log_file)

    def write(self, message: str, level: str = "INFO"):
        timestamp = datetime.datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        log_message = f"[{timestamp}] {level} {message}\n"
        # Crea la carpeta del log si no existe
        self.log_file.parent.mkdir(parents=True, exist_ok=True)
        with open(self.log_file, "a", encoding="utf-8") as f:
            f.write(log_message)
