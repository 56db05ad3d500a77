# -*- coding: utf-8 -*-
"""
只读查表数据
"""
