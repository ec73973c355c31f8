"""
Portfolio Routes - Public portfolio views
Handles: Single-page portfolio, resume (HTML and PDF), section JSON, robots.txt, sitemap.xml
"""

import io
from datetime import datetime
from flask import render_template, jsonify, current_app, Response, send_file, flash, redirect, url_for, request
from models import SINGLETON_MODELS, LIST_MODELS
from utils.data import load_section, load_site_content
from utils.helpers import group_skills_by_category, build_person_json_ld
from . import portfolio_bp


@portfolio_bp.route('/')
def index():
    """Single-page portfolio; every section falls back to default content"""
    content = load_site_content()
    return render_template('index.html',
                           content=content,
                           skill_groups=group_skills_by_category(content['skills']),
                           json_ld=build_person_json_ld(content['hero'], content['contact']))


@portfolio_bp.route('/resume')
def resume():
    """Print-styled resume page"""
    content = load_site_content()
    return render_template('resume.html',
                           content=content,
                           skill_groups=group_skills_by_category(content['skills']))


@portfolio_bp.route('/resume.pdf')
def resume_pdf():
    """Resume rendered to PDF with WeasyPrint; falls back to the print page when unavailable"""
    content = load_site_content()
    html_content = render_template('resume.html',
                                   content=content,
                                   skill_groups=group_skills_by_category(content['skills']),
                                   pdf_mode=True)

    try:
        import weasyprint
        pdf_buffer = io.BytesIO()
        weasyprint.HTML(string=html_content, base_url=request.url_root).write_pdf(pdf_buffer)
        pdf_buffer.seek(0)
    except ImportError as ie:
        current_app.logger.warning(f"WeasyPrint not installed: {str(ie)}")
        flash('PDF export is not available on this server. Use your browser\'s print dialog instead.', 'error')
        return redirect(url_for('portfolio.resume'))
    except OSError as ose:
        # Missing system libraries (pango/gobject) surface as OSError from ctypes
        current_app.logger.error(f"WeasyPrint runtime error: {str(ose)}")
        flash('PDF export failed. Use your browser\'s print dialog instead.', 'error')
        return redirect(url_for('portfolio.resume'))

    filename = (current_app.config.get('SITE_OWNER_NAME') or 'Resume').replace(' ', '_')
    return send_file(pdf_buffer,
                     mimetype='application/pdf',
                     as_attachment=True,
                     download_name=f'{filename}_Resume.pdf')


@portfolio_bp.route('/api/content/<section>')
def section_content(section):
    """Read-only JSON view of one public section"""
    if section not in SINGLETON_MODELS and section not in LIST_MODELS:
        return jsonify({'error': 'Unknown section'}), 404
    return jsonify({'section': section, 'data': load_section(section)})


@portfolio_bp.route('/robots.txt')
def robots_txt():
    site_url = current_app.config['SITE_URL']
    lines = [
        'User-agent: *',
        'Allow: /',
        'Disallow: /admin/',
        '',
        f'Sitemap: {site_url}/sitemap.xml',
        '',
    ]
    return Response('\n'.join(lines), mimetype='text/plain')


@portfolio_bp.route('/sitemap.xml')
def sitemap_xml():
    site_url = current_app.config['SITE_URL']
    pages = [
        {'loc': site_url, 'changefreq': 'monthly', 'priority': '1.0'},
        {'loc': f'{site_url}/resume', 'changefreq': 'monthly', 'priority': '0.8'},
    ]
    xml = render_template('sitemap.xml', pages=pages, lastmod=datetime.utcnow().strftime('%Y-%m-%d'))
    return Response(xml, mimetype='application/xml')
