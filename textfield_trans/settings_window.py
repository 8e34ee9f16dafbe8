
import tkinter as tk


class SettingsWindow:
    """Endpoint URL editor living in the Tk root window."""

    def __init__(self, root, endpoint):
        self.root = root
        self.endpoint = endpoint

        root.title("TextFieldTrans Settings")
        root.geometry("420x130")
        root.resizable(False, False)
        root.protocol("WM_DELETE_WINDOW", self.hide)

        tk.Label(root, text="Translation API URL").pack(pady=(12, 0))
        self.url_var = tk.StringVar(value=endpoint.url)
        self.entry = tk.Entry(root, textvariable=self.url_var, width=48)
        self.entry.pack(pady=5, padx=12)
        self.entry.bind("<Return>", lambda event: self.save())
        self.entry.bind("<FocusOut>", lambda event: self.save())

        tk.Button(root, text="Save", command=self.save_and_hide).pack(pady=8)

    def save(self):
        new_url = self.url_var.get().strip()
        self.url_var.set(new_url)
        self.endpoint.set_url(new_url)

    def save_and_hide(self):
        self.save()
        self.hide()

    def show(self):
        self.root.deiconify()
        self.root.lift()
        self.root.attributes("-topmost", True)
        self.root.after(300, lambda: self.root.attributes("-topmost", False))
        self.entry.focus_set()

    def hide(self):
        self.root.withdraw()
