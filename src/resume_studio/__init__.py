"""resume-studio: one resume model, six templates, LaTeX/DOCX/PDF export and ATS scoring."""

__version__ = "0.1.0"
