import logging
import os

import tkinter as tk

from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg
from matplotlib.figure import Figure
from tkinter import ttk, filedialog
from tkinterdnd2 import DND_FILES, TkinterDnD

from annotation import AnnotationState
from geometry import COLORS
from settings import AppSettings
from visualization import plot_background, plot_markers, plot_trace, setup_canvas_axes

logger = logging.getLogger(__name__)


class PointAnnotatorGUI:
    def __init__(self, root, settings: AppSettings | None = None):
        self.root = root
        self.root.title("Point annotator")
        self.root.geometry("1400x1000")

        self.settings = settings or AppSettings()
        self.state = AnnotationState(self.settings)

        self.setup_ui()
        self.redraw()

    def setup_ui(self):
        style = ttk.Style()
        style.theme_use('clam')

        self.create_menu()

        self.create_toolbar()

        self.create_canvas()

        self.create_points_list()

        self.status_bar = ttk.Label(self.root, text="Ready", relief=tk.SUNKEN)
        self.status_bar.pack(side=tk.BOTTOM, fill=tk.X)

    def create_menu(self):
        menubar = tk.Menu(self.root)
        self.root.config(menu=menubar)

        file_menu = tk.Menu(menubar, tearoff=0)
        menubar.add_cascade(label="File", menu=file_menu)
        file_menu.add_command(label="Open image...", command=self.load_image, accelerator="Ctrl+O")
        file_menu.add_command(label="Remove image", command=self.remove_image)
        file_menu.add_separator()
        file_menu.add_command(label="Exit", command=self.root.quit, accelerator="Ctrl+Q")

        points_menu = tk.Menu(menubar, tearoff=0)
        menubar.add_cascade(label="Points", menu=points_menu)
        points_menu.add_command(label="Remove selected", command=self.remove_selected)
        points_menu.add_command(label="Clear all", command=self.clear_points)

        self.root.bind("<Control-o>", lambda e: self.load_image())
        self.root.bind("<Control-q>", lambda e: self.root.quit())

    def create_toolbar(self):
        toolbar = ttk.Frame(self.root)
        toolbar.pack(side=tk.TOP, fill=tk.X, padx=5, pady=2)

        ttk.Label(toolbar, text="Select color:").pack(side=tk.LEFT, padx=5)
        self.color_var = tk.StringVar(value=self.state.selected_color)
        self.color_combo = ttk.Combobox(toolbar, textvariable=self.color_var,
                                        values=list(COLORS), state="readonly", width=10)
        self.color_combo.pack(side=tk.LEFT, padx=2)
        self.color_combo.bind("<<ComboboxSelected>>", self.on_color_change)
        ttk.Separator(toolbar, orient=tk.VERTICAL).pack(side=tk.LEFT, fill=tk.Y, padx=5)

        ttk.Button(toolbar, text="Open image", command=self.load_image).pack(side=tk.LEFT, padx=2)
        self.remove_image_button = ttk.Button(toolbar, text="Remove image", command=self.remove_image)
        self.remove_image_button.pack(side=tk.LEFT, padx=2)
        ttk.Separator(toolbar, orient=tk.VERTICAL).pack(side=tk.LEFT, fill=tk.Y, padx=5)

        self.clear_button = ttk.Button(toolbar, text="Clear all", command=self.clear_points)
        self.clear_button.pack(side=tk.LEFT, padx=2)

    def create_canvas(self):
        dpi = 100
        self.fig = Figure(figsize=(self.settings.canvas_width / dpi, self.settings.canvas_height / dpi), dpi=dpi)
        self.ax = self.fig.add_axes([0, 0, 1, 1])
        self.canvas = FigureCanvasTkAgg(self.fig, master=self.root)
        self.canvas.get_tk_widget().pack(side=tk.TOP, padx=5, pady=5)
        self.canvas.mpl_connect('button_press_event', self.on_canvas_click)

        widget = self.canvas.get_tk_widget()
        widget.drop_target_register(DND_FILES)
        widget.dnd_bind("<<Drop>>", self.on_drop)

    def create_points_list(self):
        points_frame = ttk.LabelFrame(self.root, text="Points")
        points_frame.pack(fill=tk.BOTH, expand=True, padx=10, pady=5)

        columns = ("ID", "X", "Y")
        self.points_tree = ttk.Treeview(points_frame, columns=columns, show="headings", height=8)

        for col in columns:
            self.points_tree.heading(col, text=col)
            self.points_tree.column(col, width=100)

        vsb = ttk.Scrollbar(points_frame, orient="vertical", command=self.points_tree.yview)
        self.points_tree.configure(yscrollcommand=vsb.set)

        self.points_tree.pack(side=tk.LEFT, fill=tk.BOTH, expand=True)
        vsb.pack(side=tk.LEFT, fill=tk.Y)
        self.points_tree.bind("<Double-1>", lambda e: self.remove_selected())

        ttk.Button(points_frame, text="Remove selected", command=self.remove_selected).pack(side=tk.LEFT, padx=10)

    def on_canvas_click(self, event):
        if event.inaxes != self.ax or event.xdata is None or event.ydata is None:
            return
        x, y = event.xdata, event.ydata
        if not self.state.within_canvas(x, y):
            return

        hit = self.state.hit_test(x, y)
        if hit is not None:
            self.state.remove_point(hit.id)
            self.update_status(f"Removed point {hit.id}")
        else:
            point = self.state.add_point(x, y)
            self.update_status(f"Added {point.label()}")
        self.redraw()

    def on_color_change(self, event=None):
        self.state.select_color(self.color_var.get())
        self.update_status(f"Color: {self.state.selected_color}")

    def load_image(self):
        filename = filedialog.askopenfilename(
            title="Select background image",
            filetypes=[("Images", "*.png *.jpg *.jpeg *.bmp *.gif *.tif *.tiff"), ("All files", "*.*")]
        )

        if not filename:
            return

        if self.state.load_background_image(filename):
            self.update_status(f"Loaded {os.path.basename(filename)}")
            self.redraw()

    def on_drop(self, event):
        paths = self.root.tk.splitlist(event.data)
        if self.state.load_dropped_image(paths):
            self.update_status(f"Loaded {self.state.image_name}")
            self.redraw()
        return event.action

    def remove_image(self):
        if self.state.background_image is None:
            return
        self.state.remove_background_image()
        self.update_status("Image removed")
        self.redraw()

    def remove_selected(self):
        selection = self.points_tree.selection()
        if not selection:
            return
        point_id = int(self.points_tree.item(selection[0], "values")[0])
        self.state.remove_point(point_id)
        self.update_status(f"Removed point {point_id}")
        self.redraw()

    def clear_points(self):
        self.state.clear_points()
        self.update_status("Cleared all points")
        self.redraw()

    def redraw(self):
        self.ax.clear()
        setup_canvas_axes(self.ax, self.settings)
        plot_background(self.ax, self.state.background_image, self.settings)
        if self.settings.show_trace:
            plot_trace(self.state.points, self.ax)
        plot_markers(self.state.points, self.ax, self.settings)
        self.canvas.draw_idle()

        self.update_points_list()
        self.remove_image_button.state(["!disabled"] if self.state.background_image is not None else ["disabled"])
        self.clear_button.state(["!disabled"] if self.state.points else ["disabled"])

    def update_points_list(self):
        self.points_tree.delete(*self.points_tree.get_children())
        for row in self.state.rows():
            self.points_tree.insert("", "end", values=row)

    def update_status(self, message):
        logger.info(message)
        self.status_bar.config(text=message)


def main(settings: AppSettings | None = None):
    settings = settings or AppSettings()
    logging.basicConfig(level=settings.log_level)
    root = TkinterDnD.Tk()
    _ = PointAnnotatorGUI(root, settings)
    root.mainloop()


if __name__ == "__main__":
    main()
